"""
calibration/config.py
---------------------
Configuration for pixel-to-physical unit conversion.
"""

from dataclasses import dataclass


@dataclass
class CalibrationConfig:
    """Rounding and unit settings for calibrated measurements."""

    # Decimal places kept on reported values
    distance_decimals: int = 2
    area_decimals: int = 2
    length_decimals: int = 2

    # Unit conversion
    cm_per_meter: float = 100.0

    # Reject pixels_per_meter <= 0 instead of producing inf/negative values
    require_positive_scale: bool = True


# Default configuration
CALIBRATION_CONFIG = CalibrationConfig()
