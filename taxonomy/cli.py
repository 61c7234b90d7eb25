"""
taxonomy/cli.py
---------------
CLI entry point for the defect classification taxonomy.

Usage:
    python -m taxonomy.cli categories                  # Print the taxonomy tree
    python -m taxonomy.cli validate --category Blade --material Surface \\
        --defect-type 2 --subtype 1                    # Validate a classification
    python -m taxonomy.cli migrate "Leading edge erosion"  # Migrate one legacy label
    python -m taxonomy.cli legacy-types                # List recognized legacy labels
"""

import argparse
import sys

from bladeinspector.logging_utils import setup_logging


def cmd_categories(args, logger):
    """Print the full taxonomy tree."""
    from .definitions import (
        BladeMaterial,
        AuxiliaryComponent,
        COMPONENT_DEFECT_TYPES,
        MATERIAL_DEFECT_TYPES,
        MATERIAL_DESCRIPTIONS,
    )
    from .subtypes import SUBTYPE_DOMAINS

    print("\n" + "=" * 60)
    print("BLADE DEFECT TAXONOMY")
    print("=" * 60)

    print("\nBlade")
    for material in BladeMaterial:
        print(f"  {material.value} - {MATERIAL_DESCRIPTIONS[material]}")
        for defect_type in MATERIAL_DEFECT_TYPES[material]:
            print(f"    [{defect_type.value}] {defect_type.display}")
            subtype_enum = SUBTYPE_DOMAINS.get((material, defect_type))
            if subtype_enum is None:
                continue
            for subtype in subtype_enum:
                print(f"        ({subtype.value}) {subtype.display}")

    print("\nAuxiliaryComponent")
    for component in AuxiliaryComponent:
        names = ", ".join(
            f"[{defect_type.value}] {defect_type.display}"
            for defect_type in COMPONENT_DEFECT_TYPES[component]
        )
        print(f"  {component.value:24} {names}")

    print("\n" + "=" * 60)
    print(f"Total: {len(BladeMaterial)} materials, {len(AuxiliaryComponent)} components, "
          f"{len(SUBTYPE_DOMAINS)} subtype groups")
    print("=" * 60)
    return 0


def cmd_validate(args, logger):
    """Validate a classification given on the command line."""
    from .classification import Classification
    from .paths import get_full_path
    from .validator import validate

    classification = Classification.from_dict({
        "category": args.category,
        "material": args.material,
        "component": args.component,
        "defect_type": args.defect_type,
        "defect_subtype": args.subtype,
    })
    result = validate(classification)

    print(f"\nClassification: {get_full_path(classification)}")
    if result.is_valid:
        print("Valid")
        return 0

    print(f"Invalid ({len(result.errors)} errors):")
    for error in result.errors:
        print(f"  - {error}")
    return 1


def cmd_migrate(args, logger):
    """Migrate a single legacy defect label."""
    from .legacy import is_recognized_legacy_type, migrate_legacy_type, to_legacy_string
    from .paths import get_full_path

    classification = migrate_legacy_type(args.legacy_type)
    recognized = is_recognized_legacy_type(args.legacy_type)

    print(f"\nLegacy type:  {args.legacy_type!r}")
    print(f"Recognized:   {'yes' if recognized else 'no (inferred or default)'}")
    print(f"Path:         {get_full_path(classification)}")
    print(f"Legacy label: {to_legacy_string(classification)}")
    return 0


def cmd_legacy_types(args, logger):
    """List legacy labels with their target paths."""
    from .legacy import get_legacy_type_names, migrate_legacy_type
    from .paths import get_full_path

    print("\n" + "=" * 60)
    print("LEGACY DEFECT TYPES")
    print("=" * 60)
    for name in get_legacy_type_names():
        print(f"  {name:24} -> {get_full_path(migrate_legacy_type(name))}")
    print("=" * 60)
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="bladeinspector taxonomy CLI - Browse, validate and migrate defect classifications"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # categories command
    subparsers.add_parser("categories", help="Print the taxonomy tree")

    # validate command
    validate_parser = subparsers.add_parser(
        "validate", help="Validate a classification"
    )
    validate_parser.add_argument(
        "--category", default="Blade", help="Blade or AuxiliaryComponent (default: Blade)"
    )
    validate_parser.add_argument("--material", help="Blade material, e.g. TopCoat")
    validate_parser.add_argument("--component", help="Auxiliary component, e.g. VortexGenerators")
    validate_parser.add_argument(
        "--defect-type", type=int, required=True, help="Defect type code"
    )
    validate_parser.add_argument("--subtype", type=int, help="Defect subtype code")

    # migrate command
    migrate_parser = subparsers.add_parser(
        "migrate", help="Migrate a legacy defect label"
    )
    migrate_parser.add_argument("legacy_type", help="Legacy label, e.g. 'Peeling'")

    # legacy-types command
    subparsers.add_parser("legacy-types", help="List recognized legacy labels")

    args = parser.parse_args()

    logger = setup_logging(args.command, args.verbose, prefix="taxonomy")

    commands = {
        "categories": cmd_categories,
        "validate": cmd_validate,
        "migrate": cmd_migrate,
        "legacy-types": cmd_legacy_types,
    }

    try:
        exit_code = commands[args.command](args, logger)
        sys.exit(exit_code)
    except Exception as e:
        logger.exception(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
