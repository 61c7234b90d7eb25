"""
taxonomy/definitions.py
-----------------------
Closed enumerations for the blade inspection defect taxonomy.

The taxonomy is a 4-level tree:
- Level 0: Category (Blade or AuxiliaryComponent)
- Level 1: BladeMaterial (under Blade) or AuxiliaryComponent (under AuxiliaryComponent)
- Level 2: Defect type - each material and component has its own enumeration
- Level 3: Defect subtype - per (material, defect type) pair, see subtypes.py

Defect type codes are plain integers when stored on a classification, but
every material/component owns a distinct enum class. A code is only ever
interpreted through the enum of its own branch, so TopCoat code 1 (Crack)
never reads as Surface code 1 (Discoloration).
"""

from enum import Enum, IntEnum
from typing import Optional


class Category(Enum):
    """Top-level split between blade defects and attached-component defects."""
    BLADE = "Blade"
    AUXILIARY_COMPONENT = "AuxiliaryComponent"


class BladeMaterial(Enum):
    """Blade layers, outermost first. Only used under Category.BLADE."""
    SURFACE = "Surface"
    TOP_COAT = "TopCoat"
    LAMINATE = "Laminate"
    STRUCTURE = "Structure"
    THROUGH = "Through"


class AuxiliaryComponent(Enum):
    """Parts mounted on or around the blade. Only used under Category.AUXILIARY_COMPONENT."""
    HUB = "Hub"
    COVER = "Cover"
    OTHER = "Other"
    NOZZLE = "Nozzle"
    VORTEX_GENERATORS = "VortexGenerators"
    SERRATIONS = "Serrations"
    RAIN_COLLAR = "RainCollar"
    LEADING_EDGE_PROTECTION = "LeadingEdgeProtection"
    PITCH_SYSTEM = "PitchSystem"
    LIGHTNING_RECEPTORS = "LightningReceptors"
    GURNEY_FLAPS = "GurneyFlaps"
    SPOILER = "Spoiler"
    TIP_BRAKE_SYSTEM = "TipBrakeSystem"
    BOLTS = "Bolts"


class DefectCode(IntEnum):
    """
    Base for defect type and subtype enumerations.

    Members compare equal to their integer code and carry the canonical
    display name used in hierarchical paths:

        class SurfaceDefectType(DefectCode):
            DISCOLORATION = 1, "Discoloration"
    """

    def __new__(cls, code: int, display: str):
        member = int.__new__(cls, code)
        member._value_ = code
        member.display = display
        return member

    @classmethod
    def from_code(cls, code) -> Optional["DefectCode"]:
        """
        Get the member for an integer code.

        Returns None for codes outside the enumeration, for non-integer
        values, and for members of a different DefectCode enum.
        """
        if isinstance(code, bool) or not isinstance(code, int):
            return None
        if isinstance(code, DefectCode) and not isinstance(code, cls):
            return None
        return cls._value2member_map_.get(int(code))

    @classmethod
    def codes(cls) -> list[int]:
        """All integer codes, in declaration order."""
        return [member.value for member in cls]


# =============================================================================
# Blade material defect types
# =============================================================================

class SurfaceDefectType(DefectCode):
    DISCOLORATION = 1, "Discoloration"
    EROSION = 2, "Erosion"


class TopCoatDefectType(DefectCode):
    CRACK = 1, "Crack"
    SCRATCH = 2, "Scratch"
    PINHOLES = 3, "Pinholes"
    SCORCH = 4, "Scorch"


class LaminateDefectType(DefectCode):
    EROSION = 1, "Erosion"
    SCRATCH = 2, "Scratch"
    DELAMINATION = 3, "Delamination"


class StructureDefectType(DefectCode):
    EROSION = 1, "Erosion"
    CRACK = 2, "Crack"
    DELAMINATION = 3, "Delamination"
    HOLE = 4, "Hole"


class ThroughDefectType(DefectCode):
    EROSION = 1, "Erosion"
    BONDLINE = 2, "Bondline"


# =============================================================================
# Auxiliary component defect types (no subtypes)
# =============================================================================

class HubDefectType(DefectCode):
    DAMAGED = 1, "Damaged"


class CoverDefectType(DefectCode):
    OTHER = 1, "Other"


class OtherComponentDefectType(DefectCode):
    OTHER = 1, "Other"


class NozzleDefectType(DefectCode):
    DAMAGED = 1, "Damaged"
    CRACK = 2, "Crack"


class VortexGeneratorDefectType(DefectCode):
    DAMAGED_OR_MISALIGNED = 1, "DamagedOrMisaligned"
    MISSING = 2, "Missing"


class SerrationDefectType(DefectCode):
    DAMAGED_OR_MISALIGNED = 1, "DamagedOrMisaligned"
    MISSING = 2, "Missing"


class RainCollarDefectType(DefectCode):
    PEELING = 1, "Peeling"
    DAMAGED = 2, "Damaged"


class LeadingEdgeProtectionDefectType(DefectCode):
    DAMAGED = 1, "Damaged"
    MISSING = 2, "Missing"


class PitchSystemDefectType(DefectCode):
    DAMAGED = 1, "Damaged"
    OTHER = 2, "Other"


class LightningReceptorDefectType(DefectCode):
    DAMAGED_OR_MISALIGNED = 1, "DamagedOrMisaligned"
    MISSING = 2, "Missing"


class GurneyFlapDefectType(DefectCode):
    DAMAGED_OR_MISALIGNED = 1, "DamagedOrMisaligned"
    MISSING = 2, "Missing"


class SpoilerDefectType(DefectCode):
    DAMAGED_OR_MISALIGNED = 1, "DamagedOrMisaligned"
    MISSING = 2, "Missing"


class TipBrakeSystemDefectType(DefectCode):
    DAMAGED_OR_MISALIGNED = 1, "DamagedOrMisaligned"
    CRACK = 2, "Crack"


class BoltsDefectType(DefectCode):
    DAMAGED = 1, "Damaged"


# =============================================================================
# Level 1 -> Level 2 lookup tables
# =============================================================================

MATERIAL_DEFECT_TYPES: dict[BladeMaterial, type[DefectCode]] = {
    BladeMaterial.SURFACE: SurfaceDefectType,
    BladeMaterial.TOP_COAT: TopCoatDefectType,
    BladeMaterial.LAMINATE: LaminateDefectType,
    BladeMaterial.STRUCTURE: StructureDefectType,
    BladeMaterial.THROUGH: ThroughDefectType,
}

COMPONENT_DEFECT_TYPES: dict[AuxiliaryComponent, type[DefectCode]] = {
    AuxiliaryComponent.HUB: HubDefectType,
    AuxiliaryComponent.COVER: CoverDefectType,
    AuxiliaryComponent.OTHER: OtherComponentDefectType,
    AuxiliaryComponent.NOZZLE: NozzleDefectType,
    AuxiliaryComponent.VORTEX_GENERATORS: VortexGeneratorDefectType,
    AuxiliaryComponent.SERRATIONS: SerrationDefectType,
    AuxiliaryComponent.RAIN_COLLAR: RainCollarDefectType,
    AuxiliaryComponent.LEADING_EDGE_PROTECTION: LeadingEdgeProtectionDefectType,
    AuxiliaryComponent.PITCH_SYSTEM: PitchSystemDefectType,
    AuxiliaryComponent.LIGHTNING_RECEPTORS: LightningReceptorDefectType,
    AuxiliaryComponent.GURNEY_FLAPS: GurneyFlapDefectType,
    AuxiliaryComponent.SPOILER: SpoilerDefectType,
    AuxiliaryComponent.TIP_BRAKE_SYSTEM: TipBrakeSystemDefectType,
    AuxiliaryComponent.BOLTS: BoltsDefectType,
}

# Short descriptions for listings (CLI, reports)
MATERIAL_DESCRIPTIONS: dict[BladeMaterial, str] = {
    BladeMaterial.SURFACE: "Outer paint finish; cosmetic marks and light wear.",
    BladeMaterial.TOP_COAT: "Protective coating above the laminate.",
    BladeMaterial.LAMINATE: "Glass/carbon fibre layup exposed under the coating.",
    BladeMaterial.STRUCTURE: "Load-carrying shell, spar caps and webs.",
    BladeMaterial.THROUGH: "Damage passing through the shell, including bondlines.",
}


def get_defect_type_enum(
    category: Category,
    material: Optional[BladeMaterial] = None,
    component: Optional[AuxiliaryComponent] = None,
) -> Optional[type[DefectCode]]:
    """
    Get the defect type enumeration for a taxonomy branch.

    Only the level 1 value matching the category is consulted: material
    for Blade, component for AuxiliaryComponent.

    Returns:
        The DefectCode subclass, or None when the branch is unresolved
    """
    if category is Category.BLADE and isinstance(material, BladeMaterial):
        return MATERIAL_DEFECT_TYPES.get(material)
    if category is Category.AUXILIARY_COMPONENT and isinstance(component, AuxiliaryComponent):
        return COMPONENT_DEFECT_TYPES.get(component)
    return None


def get_valid_defect_types(
    category: Category,
    material: Optional[BladeMaterial] = None,
    component: Optional[AuxiliaryComponent] = None,
) -> list[int]:
    """Get all valid defect type codes for a branch (empty if unresolved)."""
    enum_cls = get_defect_type_enum(category, material, component)
    return enum_cls.codes() if enum_cls else []


def get_all_materials() -> list[BladeMaterial]:
    """Get all blade materials, outermost first."""
    return list(BladeMaterial)


def get_all_components() -> list[AuxiliaryComponent]:
    """Get all auxiliary components."""
    return list(AuxiliaryComponent)


def _normalize_name(name: str) -> str:
    return "".join(ch for ch in name.casefold() if ch not in " _-")


def _parse_enum(enum_cls, value, what: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        wanted = _normalize_name(value)
        for member in enum_cls:
            if wanted in (_normalize_name(member.value), _normalize_name(member.name)):
                return member
    accepted = ", ".join(member.value for member in enum_cls)
    raise ValueError(f"Unknown {what}: {value!r}. Expected one of: {accepted}")


def parse_category(value) -> Category:
    """
    Parse a category name.

    Accepts the canonical name ("AuxiliaryComponent"), the member name
    ("AUXILIARY_COMPONENT") or a spaced label ("Auxiliary Component"),
    case-insensitively.

    Raises:
        ValueError: If the name matches no category
    """
    return _parse_enum(Category, value, "category")


def parse_material(value) -> BladeMaterial:
    """Parse a blade material name (same rules as parse_category)."""
    return _parse_enum(BladeMaterial, value, "blade material")


def parse_component(value) -> AuxiliaryComponent:
    """Parse an auxiliary component name (same rules as parse_category)."""
    return _parse_enum(AuxiliaryComponent, value, "auxiliary component")
