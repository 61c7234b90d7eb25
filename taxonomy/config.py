"""
taxonomy/config.py
------------------
Configuration for the defect taxonomy, legacy migration and path display.
"""

from dataclasses import dataclass, field
from pathlib import Path

from bladeinspector.config import DATA_DIR

# Paths - migration reports live under the shared data directory
TAXONOMY_DATA_DIR = DATA_DIR / "taxonomy"
MIGRATION_OUTPUT_DIR = TAXONOMY_DATA_DIR / "migration"


@dataclass
class TaxonomyConfig:
    """Configuration for classification display and legacy migration."""

    # Version tracking
    version: str = "1.0.0"

    # Separator between hierarchy levels in full paths
    path_separator: str = " > "

    # Separator between defect type and subtype in short displays
    display_separator: str = " - "

    # Returned for defect type codes outside their branch enumeration
    unknown_defect_type: str = "Unknown"
    unknown_component_defect_type: str = "Other"

    # =========================================================================
    # Batch legacy migration
    # =========================================================================

    # Column holding the legacy defect type string in input CSVs
    legacy_column: str = "type"

    # Where migration reports are written
    output_dir: Path = MIGRATION_OUTPUT_DIR

    # Columns written for each migrated row, in order
    output_columns: list = field(default_factory=lambda: [
        "legacy_type",
        "recognized",
        "category",
        "material",
        "component",
        "defect_type",
        "defect_subtype",
        "full_path",
        "is_valid",
    ])


# Default configuration
TAXONOMY_CONFIG = TaxonomyConfig()
