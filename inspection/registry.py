"""
inspection/registry.py
----------------------
In-memory store of inspection projects for the lifetime of the process.

Anomalies only enter a blade through record_anomaly(), which rejects
structurally invalid classifications.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from calibration.engine import calculate_annotation_metrics
from taxonomy.validator import validate

from .models import BLADE_SERIALS, Anomaly, Blade, InspectionProject

logger = logging.getLogger(__name__)


class InvalidClassificationError(ValueError):
    """Raised when an anomaly carries a classification that fails validation."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Invalid classification: " + "; ".join(self.errors))


class InspectionRegistry:
    """Holds projects in creation order."""

    def __init__(self):
        self._projects: list[InspectionProject] = []

    def create_project(self, park_name: str, turbine_id: str, model: str) -> InspectionProject:
        """New project with blades A, B and C (lengths filled in during inspection)."""
        project = InspectionProject(
            park_name=park_name,
            turbine_id=turbine_id,
            model=model,
            data_capture_status="Not Started",
            analysis_status="New",
            inspection_date=datetime.now(),
            blades=[Blade(serial_number=serial, length=0.0) for serial in BLADE_SERIALS],
        )
        self._projects.append(project)
        logger.info(f"Created project {project.id} for {park_name} / {turbine_id}")
        return project

    def get_project_by_id(self, project_id: str) -> Optional[InspectionProject]:
        for project in self._projects:
            if project.id == project_id:
                return project
        return None

    def get_all_projects(self) -> list[InspectionProject]:
        return list(self._projects)

    def record_anomaly(self, project_id: str, blade_serial: str, anomaly: Anomaly) -> Anomaly:
        """
        Attach an anomaly to a blade.

        Raises:
            KeyError: Unknown project or blade
            InvalidClassificationError: The anomaly's classification is invalid
        """
        project = self.get_project_by_id(project_id)
        if project is None:
            raise KeyError(f"Unknown project: {project_id}")

        blade = project.get_blade(blade_serial)
        if blade is None:
            raise KeyError(f"Unknown blade {blade_serial!r} in project {project_id}")

        if anomaly.classification is not None:
            result = validate(anomaly.classification)
            if not result.is_valid:
                logger.warning(
                    f"Rejected anomaly {anomaly.anomaly_id or anomaly.id}: {'; '.join(result.errors)}"
                )
                raise InvalidClassificationError(result.errors)

        blade.anomalies.append(anomaly)
        logger.debug(f"Recorded anomaly on blade {blade_serial} ({len(blade.anomalies)} total)")
        return anomaly

    @staticmethod
    def apply_calibration(anomaly: Anomaly, pixels_per_meter: float, root, blade_length: float = 0.0) -> Anomaly:
        """
        Return a copy of the anomaly with radius, area and width filled in
        from its image coordinates.
        """
        metrics = calculate_annotation_metrics(
            anomaly.coordinates, pixels_per_meter, root, blade_length=blade_length
        )
        return replace(
            anomaly,
            radius_meters=metrics.distance_from_root_meters,
            area_cm2=metrics.area_cm2,
            width_cm=metrics.width_cm,
        )
