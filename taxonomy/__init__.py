"""
taxonomy - hierarchical defect classification for wind turbine blade inspections.

Defects are classified as
    Blade > Material > DefectType [> Subtype]
or
    AuxiliaryComponent > Component > DefectType

This package holds the closed enumerations, the structural validator, the
legacy label migration and the path formatting used by reports.

Usage:
    python -m taxonomy.cli categories      # Print the taxonomy tree
    python -m taxonomy.cli validate ...    # Validate a classification
    python -m taxonomy.cli migrate LABEL   # Migrate a legacy defect label
    python -m taxonomy.cli legacy-types    # List recognized legacy labels
"""

__version__ = "1.0.0"
