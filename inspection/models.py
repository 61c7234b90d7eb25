"""
inspection/models.py
--------------------
Inspection records: project > blades > views > images, with anomalies
attached to blades and images.

Severity runs 1 (cosmetic) to 5 (very serious). Conditions are the worst
severity present, or 1 when nothing has been recorded.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from calibration.geometry import ImageCoordinates
from taxonomy.classification import Classification
from taxonomy.legacy import migrate_legacy_type
from taxonomy.paths import get_defect_type_display

MIN_SEVERITY = 1
MAX_SEVERITY = 5

BLADE_SERIALS = ("A", "B", "C")


def _new_id() -> str:
    return str(uuid.uuid4())


def _worst_severity(anomalies) -> int:
    return max((a.severity for a in anomalies), default=MIN_SEVERITY)


@dataclass
class Anomaly:
    """
    A detected defect on a blade.

    `defect_type` is the legacy free-text label kept for older records;
    `classification` supersedes it when present.
    """
    anomaly_id: str = ""
    severity: int = MIN_SEVERITY
    defect_type: str = "Other"
    classification: Optional[Classification] = None
    radius_meters: float = 0.0
    blade_side: str = "PS"       # PS_LE, PS_TE, SS_LE, SS_TE, PS, SS
    location: str = "Middle"     # Root, Middle, Tip
    area_cm2: float = 0.0
    width_cm: float = 0.0
    part: int = 0
    coordinates: ImageCoordinates = field(default_factory=ImageCoordinates)
    recommendation: str = ""
    id: str = field(default_factory=_new_id)

    def get_defect_type_display(self) -> str:
        """"Erosion - Chip" from the classification, else the legacy label."""
        if self.classification is not None:
            return get_defect_type_display(self.classification)
        return self.defect_type

    def resolve_classification(self) -> Classification:
        """The classification, or one migrated from the legacy label."""
        if self.classification is not None:
            return self.classification
        return migrate_legacy_type(self.defect_type)


@dataclass
class InspectionImage:
    image_url: str = ""
    sequence_order: int = 0       # 0 at the root
    position_meters: float = 0.0
    anomalies: list[Anomaly] = field(default_factory=list)
    id: str = field(default_factory=_new_id)


@dataclass
class BladeView:
    """One side of a blade (PS, SS, LE, TE) as an ordered image sequence."""
    side: str = ""
    images: list[InspectionImage] = field(default_factory=list)


@dataclass
class Blade:
    serial_number: str = ""
    length: float = 0.0
    anomalies: list[Anomaly] = field(default_factory=list)
    views: list[BladeView] = field(default_factory=list)
    id: str = field(default_factory=_new_id)

    @property
    def condition(self) -> int:
        return _worst_severity(self.anomalies)


@dataclass
class InspectionProject:
    """Inspection of one turbine."""
    park_name: str = ""
    turbine_id: str = ""
    model: str = ""
    data_capture_status: str = "Pending"
    analysis_status: str = "Pending"
    inspection_date: datetime = field(default_factory=datetime.now)
    blades: list[Blade] = field(default_factory=list)
    id: str = field(default_factory=_new_id)

    @property
    def total_anomalies(self) -> int:
        return sum(len(blade.anomalies) for blade in self.blades)

    @property
    def overall_condition(self) -> int:
        return _worst_severity(a for blade in self.blades for a in blade.anomalies)

    def get_blade(self, serial_number: str) -> Optional[Blade]:
        for blade in self.blades:
            if blade.serial_number == serial_number:
                return blade
        return None
