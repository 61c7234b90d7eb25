"""
bladeinspector - wind turbine blade inspection defect tooling.

Records blade and auxiliary-component defects against a hierarchical
classification taxonomy, migrates legacy flat defect labels, and turns
image-space annotations into physical measurements.

Usage:
    bladeinspector calibrate --help
    bladeinspector migrate-file legacy_defects.csv
    python -m taxonomy.cli validate --category Blade --material Surface --defect-type 2
"""

__version__ = "0.1.0"
