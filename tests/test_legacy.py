"""
tests/test_legacy.py
--------------------
Unit tests for legacy label migration:
- Table lookups (case-insensitive)
- Keyword inference and the default classification
- Reverse mapping back to legacy labels
- Returned classifications are independent copies

Run with: python -m pytest tests/test_legacy.py -v
"""

import pytest

from taxonomy.definitions import (
    AuxiliaryComponent,
    BladeMaterial,
    Category,
    LaminateDefectType,
    StructureDefectType,
    SurfaceDefectType,
    TopCoatDefectType,
)
from taxonomy.classification import Classification
from taxonomy.legacy import (
    LEGACY_MAPPING,
    get_default_classification,
    get_legacy_type_names,
    is_recognized_legacy_type,
    migrate_legacy_type,
    to_legacy_string,
)
from taxonomy.subtypes import SurfaceDiscolorationSubtype, SurfaceErosionSubtype, TopCoatCrackSubtype
from taxonomy.validator import validate


class TestLegacyTable:
    """Tests for the fixed legacy mapping table."""

    def test_table_keys_in_order(self):
        """Eight legacy labels in lookup order."""
        assert get_legacy_type_names() == (
            "Erosion", "Crack", "Pinholes", "Peeling", "Flaking",
            "Discoloration", "Damaged or Misaligned", "Other",
        )

    def test_every_entry_valid(self):
        """All table targets pass validation."""
        for name, target in LEGACY_MAPPING.items():
            assert validate(target.to_classification()).is_valid, name

    def test_table_is_read_only(self):
        """The mapping cannot be modified."""
        with pytest.raises(TypeError):
            LEGACY_MAPPING["Rust"] = get_default_classification()

    def test_entries_are_immutable(self):
        """Table entries reject attribute assignment."""
        with pytest.raises(AttributeError):
            LEGACY_MAPPING["Erosion"].material = BladeMaterial.THROUGH
        assert migrate_legacy_type("Erosion").material is BladeMaterial.SURFACE

    def test_editing_result_leaves_table_intact(self):
        """Mutating every migrated result never changes later lookups."""
        for name in get_legacy_type_names():
            migrated = migrate_legacy_type(name)
            migrated.category = Category.AUXILIARY_COMPONENT
            migrated.material = BladeMaterial.THROUGH
            migrated.defect_type = 99
        assert migrate_legacy_type("Erosion").material is BladeMaterial.SURFACE
        assert migrate_legacy_type("Damaged or Misaligned").category is Category.AUXILIARY_COMPONENT
        assert migrate_legacy_type("Damaged or Misaligned").material is None

    def test_migration_is_idempotent(self):
        """Repeated migration of the same label gives equal, distinct results."""
        for label in list(get_legacy_type_names()) + ["Hairline crack", "Bird strike", None]:
            first = migrate_legacy_type(label)
            second = migrate_legacy_type(label)
            assert first == second, label
            assert first is not second


class TestMigrateLegacyType:
    """Tests for label -> classification."""

    def test_erosion(self):
        """Erosion maps to Blade > Surface > Erosion."""
        c = migrate_legacy_type("Erosion")
        assert c.category is Category.BLADE
        assert c.material is BladeMaterial.SURFACE
        assert c.defect_type == SurfaceDefectType.EROSION
        assert c.defect_subtype is None

    def test_case_insensitive(self):
        """Lookup ignores case."""
        assert migrate_legacy_type("PINHOLES") == migrate_legacy_type("Pinholes")

    def test_peeling(self):
        """Peeling maps to TopCoat > Crack > None."""
        c = migrate_legacy_type("Peeling")
        assert c.material is BladeMaterial.TOP_COAT
        assert c.defect_type == TopCoatDefectType.CRACK
        assert c.defect_subtype == TopCoatCrackSubtype.NONE

    def test_flaking(self):
        """Flaking maps to Surface > Erosion > Flaking."""
        c = migrate_legacy_type("flaking")
        assert c.defect_type == SurfaceDefectType.EROSION
        assert c.defect_subtype == SurfaceErosionSubtype.FLAKING

    def test_damaged_or_misaligned(self):
        """Damaged or Misaligned maps to the vortex generators component."""
        c = migrate_legacy_type("Damaged or Misaligned")
        assert c.category is Category.AUXILIARY_COMPONENT
        assert c.component is AuxiliaryComponent.VORTEX_GENERATORS
        assert c.material is None

    @pytest.mark.parametrize("value", [None, "", "   ", 42])
    def test_blank_gives_default(self, value):
        """Blank or non-string input gives the default classification."""
        assert migrate_legacy_type(value) == get_default_classification()

    def test_default_is_surface_discoloration_mechanical(self):
        """Default is Blade > Surface > Discoloration > Mechanical."""
        c = get_default_classification()
        assert c.material is BladeMaterial.SURFACE
        assert c.defect_type == SurfaceDefectType.DISCOLORATION
        assert c.defect_subtype == SurfaceDiscolorationSubtype.MECHANICAL

    def test_unknown_gives_default(self):
        """Labels with no keyword fall back to the default."""
        assert migrate_legacy_type("Bird strike") == get_default_classification()

    def test_infer_crack(self):
        """'crack' anywhere infers TopCoat > Crack."""
        c = migrate_legacy_type("Hairline cracking near tip")
        assert c.material is BladeMaterial.TOP_COAT
        assert c.defect_type == TopCoatDefectType.CRACK

    def test_infer_chip(self):
        """'chip' infers Surface > Erosion."""
        c = migrate_legacy_type("Paint chipped")
        assert c.material is BladeMaterial.SURFACE
        assert c.defect_type == SurfaceDefectType.EROSION

    def test_infer_delamination(self):
        """'delamination' infers Laminate > Delamination."""
        c = migrate_legacy_type("Minor delamination")
        assert c.material is BladeMaterial.LAMINATE
        assert c.defect_type == LaminateDefectType.DELAMINATION

    def test_inference_order(self):
        """Crack is checked before erosion."""
        c = migrate_legacy_type("erosion with crack")
        assert c.material is BladeMaterial.TOP_COAT

    def test_returns_copies(self):
        """Editing a result does not affect later lookups."""
        first = migrate_legacy_type("Erosion")
        first.defect_subtype = 1
        first.material = BladeMaterial.THROUGH
        second = migrate_legacy_type("Erosion")
        assert second.material is BladeMaterial.SURFACE
        assert second.defect_subtype is None

    def test_default_copy_independent(self):
        """Editing the default does not leak."""
        c = get_default_classification()
        c.defect_type = 2
        assert get_default_classification().defect_type == SurfaceDefectType.DISCOLORATION


class TestToLegacyString:
    """Tests for classification -> label."""

    @pytest.mark.parametrize(
        "label", ["Erosion", "Crack", "Pinholes", "Discoloration", "Damaged or Misaligned"]
    )
    def test_exact_round_trip(self, label):
        """These labels survive a round trip unchanged."""
        assert to_legacy_string(migrate_legacy_type(label)) == label

    @pytest.mark.parametrize(
        "label, expected",
        [("Peeling", "Crack"), ("Flaking", "Erosion"), ("Other", "Discoloration")],
    )
    def test_aliased_round_trip(self, label, expected):
        """Labels sharing a target come back as the first table entry."""
        assert to_legacy_string(migrate_legacy_type(label)) == expected

    def test_subtype_ignored(self):
        """Subtype does not affect the reverse lookup."""
        c = migrate_legacy_type("Erosion")
        c.defect_subtype = SurfaceErosionSubtype.CHIP.value
        assert to_legacy_string(c) == "Erosion"

    def test_unmapped_gives_full_path(self):
        """Without a table match the full path is returned."""
        c = Classification(
            category=Category.BLADE,
            material=BladeMaterial.STRUCTURE,
            defect_type=StructureDefectType.HOLE.value,
        )
        assert to_legacy_string(c) == "Blade > Structure > Hole"


class TestRecognition:
    """Tests for is_recognized_legacy_type."""

    def test_table_keys_recognized(self):
        """Every table key is recognized in any case."""
        for name in get_legacy_type_names():
            assert is_recognized_legacy_type(name)
            assert is_recognized_legacy_type(name.upper())

    def test_inferred_not_recognized(self):
        """Keyword inference does not count as recognition."""
        assert not is_recognized_legacy_type("Hairline crack")

    @pytest.mark.parametrize("value", [None, "", "  "])
    def test_blank_not_recognized(self, value):
        """Blank input is not recognized."""
        assert not is_recognized_legacy_type(value)
