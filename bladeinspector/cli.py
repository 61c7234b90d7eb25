"""
bladeinspector/cli.py
---------------------
Command-line interface for blade inspection tooling.

Usage:
    bladeinspector calibrate --ppm 120 --root 0 0 --box 1190 10 20 20
    bladeinspector calibrate --ppm 120 --root 0 0 --input boxes.csv --output measured.csv
    bladeinspector migrate-file legacy_anomalies.csv --run-id 2
    bladeinspector taxonomy              # Print the classification tree
"""
import argparse
import sys

from .logging_utils import setup_logging


def cmd_calibrate(args, logger):
    """Convert pixel annotations to physical measurements."""
    if args.input:
        from calibration.batch import calibrate_file

        if not args.output:
            print("--output is required with --input")
            return 1

        calibrated = calibrate_file(args.input, args.output, args.ppm, tuple(args.root))
        print(f"\nCalibrated {len(calibrated):,} annotations -> {args.output}")
        return 0

    if not args.box:
        print("Provide either --box X Y W H or --input CSV")
        return 1

    from calibration.engine import calibrate

    metrics = calibrate(args.blade_length, args.ppm, tuple(args.root), tuple(args.box))

    print(f"\nCalibration ({args.ppm} px/m):")
    print(f"  Distance from root: {metrics.distance_from_root_meters:.2f} m")
    print(f"  Size:               {metrics.width_cm:.2f} x {metrics.height_cm:.2f} cm")
    print(f"  Area:               {metrics.area_cm2:.2f} cm²")
    return 0


def cmd_migrate_file(args, logger):
    """Migrate a CSV of legacy defect labels to hierarchical classifications."""
    from taxonomy.migrate import migrate_legacy_file

    result = migrate_legacy_file(
        args.input,
        output_dir=args.output_dir,
        run_id=args.run_id,
        column=args.column,
    )
    stats = result["stats"]

    print(f"\nMigration complete:")
    print(f"  Rows:             {stats['n_rows']:,}")
    print(f"  Recognized:       {stats['n_recognized']:,}")
    print(f"  Inferred/default: {stats['n_inferred_or_default']:,}")
    print(f"  Output:           {result['paths']['migrated']}")
    return 0


def cmd_taxonomy(args, logger):
    """Print the classification tree."""
    from taxonomy.cli import cmd_categories

    return cmd_categories(args, logger)


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="bladeinspector",
        description="bladeinspector - Wind turbine blade inspection tooling",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # calibrate command
    calibrate_parser = subparsers.add_parser(
        "calibrate",
        help="Pixel annotations -> distance from root and area",
    )
    calibrate_parser.add_argument(
        "--ppm", type=float, required=True, help="Calibration scale in pixels per meter"
    )
    calibrate_parser.add_argument(
        "--root", type=float, nargs=2, metavar=("X", "Y"), default=[0.0, 0.0],
        help="Pixel position of the blade root (default: 0 0)",
    )
    calibrate_parser.add_argument(
        "--box", type=float, nargs=4, metavar=("X", "Y", "W", "H"),
        help="Single defect box (top-left x/y, width, height)",
    )
    calibrate_parser.add_argument(
        "--blade-length", type=float, default=0.0, help="Blade length in meters (reference only)"
    )
    calibrate_parser.add_argument("--input", help="CSV with x, y, width, height columns")
    calibrate_parser.add_argument("--output", help="Output CSV path")
    calibrate_parser.set_defaults(func=cmd_calibrate)

    # migrate-file command
    migrate_parser = subparsers.add_parser(
        "migrate-file",
        help="Migrate legacy defect labels in a CSV",
    )
    migrate_parser.add_argument("input", help="CSV with a legacy defect type column")
    migrate_parser.add_argument("--column", help="Legacy label column (default: type)")
    migrate_parser.add_argument("--output-dir", help="Output directory for parquet + stats")
    migrate_parser.add_argument("--run-id", type=int, default=1, help="Run number for output files")
    migrate_parser.set_defaults(func=cmd_migrate_file)

    # taxonomy command
    taxonomy_parser = subparsers.add_parser(
        "taxonomy",
        help="Print the classification tree",
    )
    taxonomy_parser.set_defaults(func=cmd_taxonomy)

    # Parse and execute
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logger = setup_logging(args.command, args.verbose)

    try:
        sys.exit(args.func(args, logger))
    except Exception as e:
        logger.exception(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
