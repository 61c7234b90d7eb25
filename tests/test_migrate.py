"""
tests/test_migrate.py
---------------------
Tests for batch legacy migration (DataFrame and CSV -> Parquet).

Run with: python -m pytest tests/test_migrate.py -v
"""

import json

import pandas as pd
import pytest

from taxonomy.config import TaxonomyConfig
from taxonomy.migrate import migrate_legacy_file, migrate_legacy_frame, summarize_migration


@pytest.fixture
def legacy_frame():
    return pd.DataFrame({
        "anomaly_id": ["A1", "A2", "A3", "A4", "A5"],
        "type": ["Erosion", "peeling", "Hairline crack", None, "Bird strike"],
    })


class TestMigrateFrame:
    """Tests for migrate_legacy_frame()."""

    def test_one_row_per_input(self, legacy_frame):
        """Output aligns with the input index."""
        migrated = migrate_legacy_frame(legacy_frame)
        assert len(migrated) == 5
        assert list(migrated.index) == list(legacy_frame.index)
        assert list(migrated.columns) == TaxonomyConfig().output_columns

    def test_paths(self, legacy_frame):
        """Each label resolves to its hierarchical path."""
        paths = migrate_legacy_frame(legacy_frame)["full_path"].tolist()
        assert paths == [
            "Blade > Surface > Erosion",
            "Blade > TopCoat > Crack",
            "Blade > TopCoat > Crack",
            "Blade > Surface > Discoloration > Mechanical",
            "Blade > Surface > Discoloration > Mechanical",
        ]

    def test_recognition_flags(self, legacy_frame):
        """Only table keys are flagged as recognized."""
        recognized = migrate_legacy_frame(legacy_frame)["recognized"].tolist()
        assert recognized == [True, True, False, False, False]

    def test_all_valid(self, legacy_frame):
        """Migration always yields valid classifications."""
        assert migrate_legacy_frame(legacy_frame)["is_valid"].all()

    def test_subtype_nullable_int(self, legacy_frame):
        """Subtype column keeps missing values as <NA>."""
        migrated = migrate_legacy_frame(legacy_frame)
        assert str(migrated["defect_subtype"].dtype) == "Int64"
        assert pd.isna(migrated.loc[0, "defect_subtype"])
        assert migrated.loc[1, "defect_subtype"] == 0

    def test_custom_column(self):
        """Label column can be chosen."""
        df = pd.DataFrame({"label": ["Pinholes"]})
        migrated = migrate_legacy_frame(df, column="label")
        assert migrated.loc[0, "full_path"] == "Blade > TopCoat > Pinholes"

    def test_missing_column(self):
        """Unknown column raises ValueError."""
        with pytest.raises(ValueError, match="not found"):
            migrate_legacy_frame(pd.DataFrame({"label": ["Erosion"]}))

    def test_summary(self, legacy_frame):
        """Summary counts recognized, blank and distinct paths."""
        stats = summarize_migration(migrate_legacy_frame(legacy_frame))
        assert stats["n_rows"] == 5
        assert stats["n_recognized"] == 2
        assert stats["n_inferred_or_default"] == 3
        assert stats["n_blank"] == 1
        assert stats["n_invalid"] == 0
        assert stats["paths_used"] == 3
        assert stats["path_distribution"]["Blade > TopCoat > Crack"] == 2


class TestMigrateFile:
    """Tests for migrate_legacy_file()."""

    def test_writes_parquet_and_stats(self, tmp_path, legacy_frame):
        """Writes run-numbered Parquet and JSON outputs."""
        source = tmp_path / "legacy.csv"
        legacy_frame.to_csv(source, index=False)

        result = migrate_legacy_file(source, output_dir=tmp_path / "out", run_id=3)

        migrated_path = result["paths"]["migrated"]
        stats_path = result["paths"]["stats"]
        assert migrated_path.name == "legacy_migration_run3.parquet"
        assert stats_path.name == "legacy_migration_stats_run3.json"

        written = pd.read_parquet(migrated_path)
        assert len(written) == 5
        assert written.loc[0, "category"] == "Blade"

        with open(stats_path, encoding="utf-8") as f:
            stats = json.load(f)
        assert stats["run_id"] == 3
        assert stats["n_blank"] == 1

    def test_missing_file(self, tmp_path):
        """Missing input raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            migrate_legacy_file(tmp_path / "missing.csv", output_dir=tmp_path)
