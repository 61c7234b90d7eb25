"""
inspection - turbine inspection records and the in-memory project registry.
"""

from .models import Anomaly, Blade, BladeView, InspectionImage, InspectionProject
from .registry import InspectionRegistry, InvalidClassificationError

__all__ = [
    "Anomaly",
    "Blade",
    "BladeView",
    "InspectionImage",
    "InspectionProject",
    "InspectionRegistry",
    "InvalidClassificationError",
]
