"""
calibration - physical measurements for image-space defect annotations.

Converts pixel geometry drawn on inspection photos (axis-aligned boxes or
4-point polygons) into distance from the blade root (meters) and defect
area (square centimeters), given a pixels-per-meter scale and the pixel
position of the blade root.

Usage:
    bladeinspector calibrate --ppm 120 --root 0 0 --box 340 80 24 16
    bladeinspector calibrate --ppm 120 --root 0 0 --input boxes.csv --output metrics.csv
"""

__version__ = "1.0.0"
