"""
tests/test_cli.py
-----------------
Tests for the command handlers behind both CLIs.

Handlers are called directly with an argparse Namespace so no log files
are written.

Run with: python -m pytest tests/test_cli.py -v
"""

import logging
from argparse import Namespace

import pandas as pd

from bladeinspector.cli import cmd_calibrate, cmd_migrate_file, cmd_taxonomy
from taxonomy.cli import cmd_legacy_types, cmd_migrate, cmd_validate

logger = logging.getLogger("tests")


class TestTaxonomyCommands:
    """Tests for python -m taxonomy.cli handlers."""

    def test_validate_valid(self, capsys):
        """Valid classifications exit 0."""
        args = Namespace(category="Blade", material="Surface", component=None, defect_type=2, subtype=1)
        assert cmd_validate(args, logger) == 0
        out = capsys.readouterr().out
        assert "Blade > Surface > Erosion > Chip" in out
        assert "Valid" in out

    def test_validate_invalid(self, capsys):
        """Invalid classifications exit 1 and list errors."""
        args = Namespace(category="Blade", material="TopCoat", component=None, defect_type=2, subtype=1)
        assert cmd_validate(args, logger) == 1
        assert "DefectSubtype should be null or 0 for TopCoat > Scratch" in capsys.readouterr().out

    def test_migrate(self, capsys):
        """Shows the migrated path and recognition."""
        assert cmd_migrate(Namespace(legacy_type="Peeling"), logger) == 0
        out = capsys.readouterr().out
        assert "Blade > TopCoat > Crack" in out
        assert "Recognized:   yes" in out

    def test_legacy_types(self, capsys):
        """Lists every legacy label."""
        assert cmd_legacy_types(Namespace(), logger) == 0
        assert "Damaged or Misaligned" in capsys.readouterr().out

    def test_tree(self, capsys):
        """Tree lists materials and components."""
        assert cmd_taxonomy(Namespace(), logger) == 0
        out = capsys.readouterr().out
        assert "TopCoat" in out
        assert "LightningReceptors" in out


class TestBladeInspectorCommands:
    """Tests for bladeinspector CLI handlers."""

    def test_calibrate_single_box(self, capsys):
        """Single box prints distance and area."""
        args = Namespace(
            input=None, output=None, box=[95.0, -5.0, 10.0, 10.0],
            ppm=10.0, root=[0.0, 0.0], blade_length=0.0,
        )
        assert cmd_calibrate(args, logger) == 0
        assert "10.00 m" in capsys.readouterr().out

    def test_calibrate_needs_box_or_input(self):
        """Neither box nor input is an error."""
        args = Namespace(input=None, output=None, box=None, ppm=10.0, root=[0.0, 0.0], blade_length=0.0)
        assert cmd_calibrate(args, logger) == 1

    def test_calibrate_file(self, tmp_path):
        """CSV mode writes the output file."""
        source = tmp_path / "boxes.csv"
        target = tmp_path / "measured.csv"
        pd.DataFrame({"x": [0], "y": [0], "width": [10], "height": [10]}).to_csv(source, index=False)
        args = Namespace(
            input=str(source), output=str(target), box=None,
            ppm=10.0, root=[0.0, 0.0], blade_length=0.0,
        )
        assert cmd_calibrate(args, logger) == 0
        assert target.exists()

    def test_migrate_file(self, tmp_path, capsys):
        """Batch migration reports counts."""
        source = tmp_path / "legacy.csv"
        pd.DataFrame({"type": ["Erosion", "Crack", "rust"]}).to_csv(source, index=False)
        args = Namespace(input=str(source), output_dir=str(tmp_path / "out"), run_id=1, column=None)
        assert cmd_migrate_file(args, logger) == 0
        out = capsys.readouterr().out
        assert "Recognized:       2" in out
        assert (tmp_path / "out" / "legacy_migration_run1.parquet").exists()
