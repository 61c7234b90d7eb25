"""
calibration/geometry.py
-----------------------
Annotation geometry in image pixel space.

Two annotation forms exist side by side:
- Legacy rectangle: top-left x/y plus width/height
- Polygon: 4 ordered vertices stored flat as [x1, y1, x2, y2, x3, y3, x4, y4]

An annotation counts as a polygon only when it carries exactly 8 finite numeric
coordinates; anything else falls back to the rectangle fields.
"""

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import NamedTuple, Sequence

import numpy as np

# 4 vertices x 2 coordinates
POLYGON_COORDINATE_COUNT = 8


class Point(NamedTuple):
    """Pixel position (x to the right, y down)."""
    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned pixel box anchored at its top-left corner."""
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)


def _as_vertices(vertices) -> np.ndarray:
    """Accept [(x, y), ...] or a flat [x1, y1, x2, y2, ...] sequence."""
    return np.asarray(vertices, dtype=float).reshape(-1, 2)


def polygon_area(vertices) -> float:
    """
    Area of a simple polygon using the shoelace formula.

    Vertices must be ordered (clockwise or counter-clockwise); the sign of
    the signed area is discarded.

    Examples:
        >>> polygon_area([(0, 0), (10, 0), (10, 10), (0, 10)])
        100.0
    """
    points = _as_vertices(vertices)
    if len(points) < 3:
        return 0.0

    x, y = points[:, 0], points[:, 1]
    signed = np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)
    return float(abs(signed) / 2.0)


def polygon_bounding_box(vertices) -> BoundingBox:
    """Smallest axis-aligned box enclosing all vertices."""
    points = _as_vertices(vertices)
    min_x, min_y = points.min(axis=0)
    max_x, max_y = points.max(axis=0)
    return BoundingBox(float(min_x), float(min_y), float(max_x - min_x), float(max_y - min_y))


def _is_number(value) -> bool:
    """Finite real number (NaN and inf do not count)."""
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


@dataclass
class ImageCoordinates:
    """
    Pixel geometry of one defect annotation.

    Attributes:
        x, y, width, height: Legacy rectangle form
        polygon_points: Flat polygon coordinates (8 values for a quadrilateral)
        reference_width, reference_height: Pixel size of the image the
            annotation was drawn on
    """
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    polygon_points: list[float] = field(default_factory=list)
    reference_width: float = 0.0
    reference_height: float = 0.0

    @classmethod
    def from_polygon(
        cls,
        vertices: Sequence[Sequence[float]],
        reference_width: float = 0.0,
        reference_height: float = 0.0,
    ) -> "ImageCoordinates":
        """Build polygon-form coordinates from (x, y) vertex pairs."""
        flat = [float(value) for vertex in vertices for value in vertex]
        return cls(
            polygon_points=flat,
            reference_width=reference_width,
            reference_height=reference_height,
        )

    @property
    def is_polygon(self) -> bool:
        points = self.polygon_points or []
        return len(points) == POLYGON_COORDINATE_COUNT and all(_is_number(v) for v in points)

    def vertices(self) -> list[Point]:
        """Polygon vertices in drawing order (empty for rectangles)."""
        if not self.is_polygon:
            return []
        points = self.polygon_points
        return [Point(points[i], points[i + 1]) for i in range(0, POLYGON_COORDINATE_COUNT, 2)]

    def area_in_pixels(self) -> float:
        """Shoelace area for polygons, width x height for rectangles."""
        if self.is_polygon:
            return polygon_area(self.polygon_points)
        return self.width * self.height

    def bounding_box(self) -> BoundingBox:
        """Enclosing box: the polygon's extent, or the rectangle itself."""
        if self.is_polygon:
            return polygon_bounding_box(self.polygon_points)
        return BoundingBox(self.x, self.y, self.width, self.height)

    def bounding_box_dimensions(self) -> tuple[float, float]:
        """(width, height) of the enclosing box, for display."""
        box = self.bounding_box()
        return box.width, box.height

    def center(self) -> Point:
        return self.bounding_box().center
