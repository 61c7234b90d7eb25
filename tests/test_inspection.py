"""
tests/test_inspection.py
------------------------
Tests for inspection records and the in-memory project registry.

Run with: python -m pytest tests/test_inspection.py -v
"""

import pytest

from calibration.geometry import ImageCoordinates
from inspection import (
    Anomaly,
    Blade,
    InspectionProject,
    InspectionRegistry,
    InvalidClassificationError,
)
from taxonomy.classification import Classification
from taxonomy.definitions import BladeMaterial, Category


def surface_erosion(subtype=None):
    return Classification(
        category=Category.BLADE, material=BladeMaterial.SURFACE, defect_type=2, defect_subtype=subtype
    )


@pytest.fixture
def registry():
    return InspectionRegistry()


@pytest.fixture
def project(registry):
    return registry.create_project("North Sea 2", "SG114-50", "SG114 MY17")


class TestAnomaly:
    """Tests for Anomaly display and classification resolution."""

    def test_display_prefers_classification(self):
        """Classification wins over the legacy label."""
        anomaly = Anomaly(defect_type="Crack", classification=surface_erosion(1))
        assert anomaly.get_defect_type_display() == "Erosion - Chip"

    def test_display_hides_none_subtype(self):
        """A 'None' subtype is not shown."""
        anomaly = Anomaly(classification=Classification(
            category=Category.BLADE, material=BladeMaterial.TOP_COAT, defect_type=1, defect_subtype=0
        ))
        assert anomaly.get_defect_type_display() == "Crack"

    def test_display_falls_back_to_legacy(self):
        """Without a classification the legacy label is shown."""
        assert Anomaly(defect_type="Pinholes").get_defect_type_display() == "Pinholes"

    def test_resolve_from_legacy(self):
        """Legacy labels are migrated on demand."""
        resolved = Anomaly(defect_type="Flaking").resolve_classification()
        assert resolved.material is BladeMaterial.SURFACE
        assert resolved.defect_subtype == 2

    def test_resolve_keeps_classification(self):
        """An existing classification is returned as is."""
        classification = surface_erosion()
        assert Anomaly(classification=classification).resolve_classification() is classification


class TestConditions:
    """Tests for worst-severity conditions."""

    def test_empty_condition_is_one(self):
        """No anomalies means condition 1."""
        assert Blade().condition == 1
        assert InspectionProject().overall_condition == 1

    def test_worst_severity(self):
        """Condition is the maximum severity across blades."""
        project = InspectionProject(blades=[
            Blade(serial_number="A", anomalies=[Anomaly(severity=2), Anomaly(severity=4)]),
            Blade(serial_number="B", anomalies=[Anomaly(severity=3)]),
        ])
        assert project.blades[0].condition == 4
        assert project.overall_condition == 4
        assert project.total_anomalies == 3


class TestRegistry:
    """Tests for InspectionRegistry."""

    def test_create_project(self, project):
        """New projects get blades A, B, C and initial statuses."""
        assert [b.serial_number for b in project.blades] == ["A", "B", "C"]
        assert all(b.length == 0 for b in project.blades)
        assert project.data_capture_status == "Not Started"
        assert project.analysis_status == "New"

    def test_lookup(self, registry, project):
        """Projects are found by id."""
        other = registry.create_project("Park", "T2", "M")
        assert registry.get_project_by_id(project.id) is project
        assert registry.get_project_by_id("missing") is None
        assert registry.get_all_projects() == [project, other]

    def test_record_valid_anomaly(self, registry, project):
        """Valid classifications are attached to the blade."""
        anomaly = Anomaly(severity=3, classification=surface_erosion(1))
        registry.record_anomaly(project.id, "B", anomaly)
        assert project.get_blade("B").anomalies == [anomaly]
        assert project.total_anomalies == 1
        assert project.overall_condition == 3

    def test_record_legacy_anomaly(self, registry, project):
        """Anomalies without a classification are accepted."""
        registry.record_anomaly(project.id, "A", Anomaly(defect_type="Erosion"))
        assert project.total_anomalies == 1

    def test_record_invalid_anomaly(self, registry, project):
        """Invalid classifications are blocked with their errors."""
        anomaly = Anomaly(classification=surface_erosion(9))
        with pytest.raises(InvalidClassificationError) as excinfo:
            registry.record_anomaly(project.id, "A", anomaly)
        assert excinfo.value.errors == ["Invalid DefectSubtype 9 for Surface > Erosion"]
        assert project.total_anomalies == 0

    def test_invalid_is_value_error(self):
        """InvalidClassificationError is a ValueError."""
        assert issubclass(InvalidClassificationError, ValueError)

    def test_unknown_project_or_blade(self, registry, project):
        """Unknown targets raise KeyError."""
        with pytest.raises(KeyError):
            registry.record_anomaly("missing", "A", Anomaly())
        with pytest.raises(KeyError):
            registry.record_anomaly(project.id, "D", Anomaly())

    def test_apply_calibration(self, registry):
        """Radius, area and width come from the coordinates."""
        anomaly = Anomaly(coordinates=ImageCoordinates(x=95, y=-5, width=10, height=10))
        calibrated = registry.apply_calibration(anomaly, 10.0, (0.0, 0.0))
        assert calibrated.radius_meters == 10.0
        assert calibrated.area_cm2 == 10000.0
        assert calibrated.width_cm == 100.0
        assert calibrated.id == anomaly.id
        assert anomaly.radius_meters == 0.0
