"""
taxonomy/migrate.py
-------------------
Batch migration of legacy defect records to the hierarchical taxonomy.

Reads a CSV export with a legacy defect type column, migrates every row
and writes a Parquet report plus summary statistics for review.

Usage:
    bladeinspector migrate-file legacy_defects.csv --run-id 2
"""

import json
import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from .config import TAXONOMY_CONFIG
from .legacy import is_recognized_legacy_type, migrate_legacy_type
from .paths import get_full_path
from .validator import validate

logger = logging.getLogger(__name__)


def _clean_label(value) -> Optional[str]:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    return str(value)


def migrate_legacy_frame(df: pd.DataFrame, column: str = None, config=None) -> pd.DataFrame:
    """
    Migrate every legacy label in a DataFrame column.

    Args:
        df: Input rows
        column: Legacy label column (defaults to config.legacy_column)
        config: TaxonomyConfig instance (uses default if None)

    Returns:
        New DataFrame, one row per input row, with config.output_columns

    Raises:
        ValueError: If the column is missing
    """
    config = config or TAXONOMY_CONFIG
    column = column or config.legacy_column

    if column not in df.columns:
        raise ValueError(
            f"Column {column!r} not found. Available columns: {', '.join(map(str, df.columns))}"
        )

    rows = []
    for value in df[column].tolist():
        label = _clean_label(value)
        classification = migrate_legacy_type(label)
        record = classification.to_dict()
        rows.append({
            "legacy_type": label,
            "recognized": is_recognized_legacy_type(label),
            **record,
            "full_path": get_full_path(classification, config),
            "is_valid": validate(classification).is_valid,
        })

    migrated = pd.DataFrame(rows, columns=config.output_columns, index=df.index)
    migrated["defect_subtype"] = migrated["defect_subtype"].astype("Int64")

    logger.info(
        f"Migrated {len(migrated):,} rows "
        f"({int(migrated['recognized'].sum()):,} recognized legacy types)"
    )
    return migrated


def summarize_migration(migrated: pd.DataFrame) -> dict:
    """Summary statistics for a migrated DataFrame."""
    n_rows = len(migrated)
    n_recognized = int(migrated["recognized"].sum())
    n_blank = int(migrated["legacy_type"].isna().sum())

    path_counts = migrated["full_path"].value_counts()

    return {
        "n_rows": n_rows,
        "n_recognized": n_recognized,
        "n_inferred_or_default": n_rows - n_recognized,
        "n_blank": n_blank,
        "n_invalid": n_rows - int(migrated["is_valid"].sum()),
        "paths_used": int(path_counts.size),
        "path_distribution": {path: int(count) for path, count in path_counts.items()},
    }


def migrate_legacy_file(
    input_path: Path,
    output_dir: Optional[Path] = None,
    run_id: int = 1,
    column: str = None,
    config=None,
) -> dict:
    """
    Full pipeline: CSV of legacy records -> Parquet report + stats JSON.

    Returns dict with migration results and statistics.
    """
    config = config or TAXONOMY_CONFIG
    input_path = Path(input_path)
    output_dir = Path(output_dir) if output_dir else Path(config.output_dir)

    if not input_path.exists():
        raise FileNotFoundError(f"Legacy defect file not found: {input_path}")

    logger.info(f"Loading legacy records from {input_path}")
    source = pd.read_csv(input_path, dtype=str, keep_default_na=True)
    logger.info(f"Loaded {len(source):,} rows")

    migrated = migrate_legacy_frame(source, column=column, config=config)
    stats = {"run_id": run_id, "input_path": str(input_path), **summarize_migration(migrated)}

    output_dir.mkdir(parents=True, exist_ok=True)

    migrated_path = output_dir / f"legacy_migration_run{run_id}.parquet"
    migrated.to_parquet(migrated_path, index=False, engine="pyarrow")

    stats_path = output_dir / f"legacy_migration_stats_run{run_id}.json"
    with open(stats_path, "w", encoding="utf-8") as f:
        json.dump(stats, f, indent=2)

    logger.info(f"Wrote {migrated_path}")
    logger.info(
        f"Recognized: {stats['n_recognized']:,}  "
        f"Inferred/default: {stats['n_inferred_or_default']:,}  "
        f"Paths used: {stats['paths_used']}"
    )

    return {
        "stats": stats,
        "migrated": migrated,
        "paths": {
            "migrated": migrated_path,
            "stats": stats_path,
        },
    }
