"""
calibration/engine.py
---------------------
Convert pixel-space defect annotations into physical measurements.

Inputs come from a calibrated inspection image: a scale in pixels per
meter and the pixel position of the blade root. Outputs are the distance
from the root to the defect center (meters) and the defect area (cm²).
"""

import logging
from dataclasses import dataclass
from typing import Union

import numpy as np

from .config import CALIBRATION_CONFIG
from .geometry import BoundingBox, ImageCoordinates, Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DefectMetrics:
    """
    Physical measurements for one annotation.

    Attributes:
        x, y, width, height: Pixel box the measurements were taken from
        distance_from_root_meters: Root to defect center, meters
        area_cm2: Defect area, square centimeters
        width_cm, height_cm: Box dimensions, centimeters
    """
    x: float
    y: float
    width: float
    height: float
    distance_from_root_meters: float
    area_cm2: float
    width_cm: float
    height_cm: float


def meters_per_pixel(pixels_per_meter: float, config=None) -> float:
    """
    Inverse of the calibration scale.

    Raises:
        ValueError: If pixels_per_meter is not positive and
            config.require_positive_scale is set
    """
    config = config or CALIBRATION_CONFIG
    if config.require_positive_scale and not pixels_per_meter > 0:
        raise ValueError(f"pixels_per_meter must be positive, got {pixels_per_meter}")
    return 1.0 / pixels_per_meter


def _as_point(value) -> Point:
    return value if isinstance(value, Point) else Point(*value)


def _as_box(value) -> BoundingBox:
    return value if isinstance(value, BoundingBox) else BoundingBox(*value)


def _distance_meters(center: Point, root: Point, mpp: float) -> float:
    distance_px = float(np.hypot(center.x - root.x, center.y - root.y))
    return distance_px * mpp


def _log_beyond_blade(distance_m: float, blade_length: float) -> None:
    if blade_length and distance_m > blade_length:
        logger.debug(
            f"Defect at {distance_m:.2f} m from root lies beyond blade length {blade_length:.2f} m"
        )


def calibrate(
    blade_length: float,
    pixels_per_meter: float,
    root: Union[Point, tuple],
    defect_box: Union[BoundingBox, tuple],
    config=None,
) -> DefectMetrics:
    """
    Calculate real-world metrics for a rectangular defect annotation.

    Args:
        blade_length: Blade length in meters (reference only; does not
            change the result)
        pixels_per_meter: Calibrated scale
        root: Pixel position of the blade root, (x, y)
        defect_box: Pixel box (x, y, width, height), top-left anchored
        config: CalibrationConfig instance (uses default if None)

    Returns:
        DefectMetrics with distance and area rounded to config precision

    Raises:
        ValueError: If pixels_per_meter is not positive (see meters_per_pixel)
    """
    config = config or CALIBRATION_CONFIG
    root = _as_point(root)
    box = _as_box(defect_box)

    mpp = meters_per_pixel(pixels_per_meter, config)

    distance_m = _distance_meters(box.center, root, mpp)
    _log_beyond_blade(distance_m, blade_length)

    # Each side converted to centimeters separately, as plain floats so
    # round() behaves the same for numpy inputs
    width_cm = float(box.width) * mpp * config.cm_per_meter
    height_cm = float(box.height) * mpp * config.cm_per_meter

    return DefectMetrics(
        x=box.x,
        y=box.y,
        width=box.width,
        height=box.height,
        distance_from_root_meters=round(distance_m, config.distance_decimals),
        area_cm2=round(width_cm * height_cm, config.area_decimals),
        width_cm=round(width_cm, config.length_decimals),
        height_cm=round(height_cm, config.length_decimals),
    )


def calculate_annotation_metrics(
    coordinates: ImageCoordinates,
    pixels_per_meter: float,
    root: Union[Point, tuple],
    blade_length: float = 0.0,
    config=None,
) -> DefectMetrics:
    """
    Metrics for either annotation form.

    Rectangles go through calibrate(). Polygons use the center of their
    bounding box for the distance and the shoelace pixel area for the
    area; width/height report the bounding box.
    """
    if not coordinates.is_polygon:
        box = BoundingBox(coordinates.x, coordinates.y, coordinates.width, coordinates.height)
        return calibrate(blade_length, pixels_per_meter, root, box, config)

    config = config or CALIBRATION_CONFIG
    root = _as_point(root)
    box = coordinates.bounding_box()

    mpp = meters_per_pixel(pixels_per_meter, config)
    cm_per_pixel = mpp * config.cm_per_meter

    distance_m = _distance_meters(box.center, root, mpp)
    _log_beyond_blade(distance_m, blade_length)

    area_cm2 = coordinates.area_in_pixels() * cm_per_pixel ** 2

    return DefectMetrics(
        x=box.x,
        y=box.y,
        width=box.width,
        height=box.height,
        distance_from_root_meters=round(distance_m, config.distance_decimals),
        area_cm2=round(area_cm2, config.area_decimals),
        width_cm=round(box.width * cm_per_pixel, config.length_decimals),
        height_cm=round(box.height * cm_per_pixel, config.length_decimals),
    )
