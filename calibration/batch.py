"""
calibration/batch.py
--------------------
Vectorised calibration of many rectangular annotations at once.

Input CSV columns: x, y, width, height (pixels). Any other columns are
passed through unchanged.
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from .config import CALIBRATION_CONFIG
from .engine import meters_per_pixel
from .geometry import Point

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["x", "y", "width", "height"]


def _round(values: pd.Series, decimals: int) -> pd.Series:
    """Round each value with built-in round(), the same as calibrate()."""
    # Series.round scales and rounds half to even, which can disagree by 0.01
    return values.map(lambda v: round(float(v), decimals))


def calibrate_frame(
    df: pd.DataFrame,
    pixels_per_meter: float,
    root,
    config=None,
) -> pd.DataFrame:
    """
    Add physical measurements to a DataFrame of pixel boxes.

    Adds: center_x, center_y, distance_from_root_m, width_cm, height_cm, area_cm2

    Raises:
        ValueError: If required columns are missing or the scale is not positive
    """
    config = config or CALIBRATION_CONFIG

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(missing)}")

    root = root if isinstance(root, Point) else Point(*root)
    mpp = meters_per_pixel(pixels_per_meter, config)

    boxes = df[REQUIRED_COLUMNS].astype(float)
    out = df.copy()

    out["center_x"] = boxes["x"] + boxes["width"] / 2.0
    out["center_y"] = boxes["y"] + boxes["height"] / 2.0

    distance_px = np.hypot(out["center_x"] - root.x, out["center_y"] - root.y)
    out["distance_from_root_m"] = _round(distance_px * mpp, config.distance_decimals)

    width_cm = boxes["width"] * mpp * config.cm_per_meter
    height_cm = boxes["height"] * mpp * config.cm_per_meter

    out["width_cm"] = _round(width_cm, config.length_decimals)
    out["height_cm"] = _round(height_cm, config.length_decimals)
    out["area_cm2"] = _round(width_cm * height_cm, config.area_decimals)

    logger.info(f"Calibrated {len(out):,} annotations at {pixels_per_meter} px/m")
    return out


def calibrate_file(
    input_path: Path,
    output_path: Path,
    pixels_per_meter: float,
    root,
    config=None,
) -> pd.DataFrame:
    """CSV of pixel boxes -> CSV with physical measurements."""
    input_path = Path(input_path)
    output_path = Path(output_path)

    if not input_path.exists():
        raise FileNotFoundError(f"Annotation file not found: {input_path}")

    logger.info(f"Loading annotations from {input_path}")
    df = pd.read_csv(input_path)

    calibrated = calibrate_frame(df, pixels_per_meter, root, config)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    calibrated.to_csv(output_path, index=False)
    logger.info(f"Wrote {output_path}")

    return calibrated
