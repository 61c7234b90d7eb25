"""
taxonomy/subtypes.py
--------------------
Level 3 defect subtype definitions.

Subtypes only exist for specific (BladeMaterial, defect type) pairs.
Auxiliary component defects never carry a subtype.

Some subtype enumerations define NONE = 0: the subtype is optional for
that pair and 0 is a legal explicit "no subtype". For every pair (with or
without an enumeration) a missing subtype or 0 means "no subtype".
"""

from typing import Optional

from .definitions import (
    BladeMaterial,
    DefectCode,
    LaminateDefectType,
    MATERIAL_DEFECT_TYPES,
    StructureDefectType,
    SurfaceDefectType,
    ThroughDefectType,
    TopCoatDefectType,
)

# Code shared by every "no subtype" value
NO_SUBTYPE = 0


# =============================================================================
# Surface
# =============================================================================

class SurfaceDiscolorationSubtype(DefectCode):
    MECHANICAL = 1, "Mechanical"
    SCORCH = 2, "Scorch"
    ICE_CONTAMINATION = 3, "IceContamination"


class SurfaceErosionSubtype(DefectCode):
    CHIP = 1, "Chip"
    FLAKING = 2, "Flaking"


# =============================================================================
# Top Coat
# =============================================================================

class TopCoatCrackSubtype(DefectCode):
    NONE = 0, "None"
    FATIGUE_CRACKS = 1, "FatigueCracks"
    TLC_SHAPED = 2, "TLCShaped"
    SPIDER_WEB_SHAPED = 3, "SpiderWebShaped"
    BOND_TRANSVERSE_TE = 4, "BondTransverseTE"
    BOND_LONGITUDINAL_TE = 5, "BondLongitudinalTE"
    BOND_TRANSVERSE_LE = 6, "BondTransverseLE"
    BOND_LONGITUDINAL_LE = 7, "BondLongitudinalLE"


class TopCoatPinholesSubtype(DefectCode):
    NONE = 0, "None"
    SCORCH = 1, "Scorch"


# =============================================================================
# Laminate
# =============================================================================

class LaminateErosionSubtype(DefectCode):
    CHIP = 1, "Chip"
    NONE = 0, "None"
    LIGHTNING = 2, "Lightning"


class LaminateDelaminationSubtype(DefectCode):
    NONE = 0, "None"
    LIGHTNING = 1, "Lightning"


# =============================================================================
# Structure
# =============================================================================

class StructureCrackSubtype(DefectCode):
    TRANSVERSE = 1, "Transverse"
    LONGITUDINAL = 2, "Longitudinal"
    TLC_SHAPED = 3, "TLCShaped"
    OTHER = 4, "Other"
    TRAILING_TRANSVERSE = 5, "TrailingTransverse"
    DIAGONAL = 6, "Diagonal"
    SURFACE = 7, "Surface"


class StructureDelaminationSubtype(DefectCode):
    EDGE = 1, "Edge"
    LIGHTNING = 2, "Lightning"
    NON_LIGHTNING = 3, "NonLightning"


# =============================================================================
# Through
# =============================================================================

class ThroughBondlineSubtype(DefectCode):
    NONE = 0, "None"
    CRUSHED = 1, "Crushed"
    OPEN_TIP = 2, "OpenTip"


# =============================================================================
# (material, defect type) -> subtype enumeration
# =============================================================================

# Pairs missing from this table permit no subtype at all
SUBTYPE_DOMAINS: dict[tuple[BladeMaterial, DefectCode], type[DefectCode]] = {
    (BladeMaterial.SURFACE, SurfaceDefectType.DISCOLORATION): SurfaceDiscolorationSubtype,
    (BladeMaterial.SURFACE, SurfaceDefectType.EROSION): SurfaceErosionSubtype,
    (BladeMaterial.TOP_COAT, TopCoatDefectType.CRACK): TopCoatCrackSubtype,
    (BladeMaterial.TOP_COAT, TopCoatDefectType.PINHOLES): TopCoatPinholesSubtype,
    (BladeMaterial.LAMINATE, LaminateDefectType.EROSION): LaminateErosionSubtype,
    (BladeMaterial.LAMINATE, LaminateDefectType.DELAMINATION): LaminateDelaminationSubtype,
    (BladeMaterial.STRUCTURE, StructureDefectType.CRACK): StructureCrackSubtype,
    (BladeMaterial.STRUCTURE, StructureDefectType.DELAMINATION): StructureDelaminationSubtype,
    (BladeMaterial.THROUGH, ThroughDefectType.BONDLINE): ThroughBondlineSubtype,
}


def _resolve_defect_type(material: BladeMaterial, defect_type) -> Optional[DefectCode]:
    enum_cls = MATERIAL_DEFECT_TYPES.get(material)
    if enum_cls is None:
        return None
    return enum_cls.from_code(defect_type)


def get_subtype_enum(material: BladeMaterial, defect_type) -> Optional[type[DefectCode]]:
    """
    Get the subtype enumeration for a (material, defect type) pair.

    Args:
        material: Blade material
        defect_type: Defect type code or member of the material's enum

    Returns:
        DefectCode subclass, or None if the pair has no subtypes
    """
    member = _resolve_defect_type(material, defect_type)
    if member is None:
        return None
    return SUBTYPE_DOMAINS.get((material, member))


def has_subtypes(material: BladeMaterial, defect_type) -> bool:
    """Check if a (material, defect type) pair defines subtypes."""
    return get_subtype_enum(material, defect_type) is not None


def get_valid_subtypes(material: BladeMaterial, defect_type) -> list[int]:
    """Get all subtype codes for a pair (empty if the pair has none)."""
    enum_cls = get_subtype_enum(material, defect_type)
    return enum_cls.codes() if enum_cls else []


def is_no_subtype(subtype) -> bool:
    """True for the two spellings of "no subtype": None and 0."""
    if subtype is None:
        return True
    return isinstance(subtype, int) and not isinstance(subtype, bool) and subtype == NO_SUBTYPE


def get_subtype_count() -> dict[str, int]:
    """Get count of subtypes per "Material > DefectType" pair."""
    return {
        f"{material.value} > {defect_type.display}": len(enum_cls)
        for (material, defect_type), enum_cls in SUBTYPE_DOMAINS.items()
    }
