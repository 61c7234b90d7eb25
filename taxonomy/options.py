"""
taxonomy/options.py
-------------------
Choice lists for building a classification step by step.

Each function returns an ordered {value: label} mapping for one dropdown
level. Labels are spaced for display ("Top Coat", "Damaged or
Misaligned"); values are the enum members or integer codes stored on the
Classification.
"""

import re
from typing import Optional

from .classification import Classification
from .definitions import (
    AuxiliaryComponent,
    BladeMaterial,
    Category,
    COMPONENT_DEFECT_TYPES,
    DefectCode,
    MATERIAL_DEFECT_TYPES,
)
from .legacy import migrate_legacy_type
from .subtypes import SurfaceDiscolorationSubtype, get_subtype_enum

# Whole-word replacements applied before camel-case splitting
LABEL_REPLACEMENTS = (
    ("TLCShaped", "T-LC Shaped"),
    ("DamagedOrMisaligned", "Damaged or Misaligned"),
)

# Subtypes that stay valid but are not offered for new classifications.
# Matched by identity: codes from different enums compare equal as ints.
HIDDEN_SUBTYPES: tuple[DefectCode, ...] = (
    SurfaceDiscolorationSubtype.ICE_CONTAMINATION,
)

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_EDGE_SUFFIX = re.compile(r"(?<=[a-z])(TE|LE|PS|SS)$")


def format_label(name: str) -> str:
    """
    Make a canonical name readable.

    Examples:
        >>> format_label("TopCoat")
        'Top Coat'
        >>> format_label("BondTransverseTE")
        'Bond Transverse TE'
        >>> format_label("TLCShaped")
        'T-LC Shaped'
    """
    if not name:
        return name

    for old, new in LABEL_REPLACEMENTS:
        name = name.replace(old, new)

    name = _EDGE_SUFFIX.sub(r" \1", name)
    return _CAMEL_BOUNDARY.sub(r"\1 \2", name)


def _labels(enum_cls: type[DefectCode]) -> dict[int, str]:
    return {member.value: format_label(member.display) for member in enum_cls}


def get_categories() -> dict[Category, str]:
    """Level 0 choices."""
    return {category: format_label(category.value) for category in Category}


def get_blade_materials() -> dict[BladeMaterial, str]:
    """Level 1 choices under Blade."""
    return {material: format_label(material.value) for material in BladeMaterial}


def get_auxiliary_components() -> dict[AuxiliaryComponent, str]:
    """Level 1 choices under AuxiliaryComponent."""
    return {component: format_label(component.value) for component in AuxiliaryComponent}


def get_defect_types_for_material(material: BladeMaterial) -> dict[int, str]:
    """Level 2 choices for a blade material."""
    enum_cls = MATERIAL_DEFECT_TYPES.get(material)
    return _labels(enum_cls) if enum_cls else {}


def get_defect_types_for_component(component: AuxiliaryComponent) -> dict[int, str]:
    """Level 2 choices for an auxiliary component."""
    enum_cls = COMPONENT_DEFECT_TYPES.get(component)
    return _labels(enum_cls) if enum_cls else {}


def get_subtypes_for_defect(material: BladeMaterial, defect_type: int) -> Optional[dict[int, str]]:
    """
    Level 3 choices for a (material, defect type) pair.

    Returns:
        {code: label}, or None when the pair takes no subtype
    """
    enum_cls = get_subtype_enum(material, defect_type)
    if enum_cls is None:
        return None
    return {
        member.value: format_label(member.display)
        for member in enum_cls
        if not any(member is hidden for hidden in HIDDEN_SUBTYPES)
    }


def create_from_legacy(legacy_type: Optional[str]) -> Classification:
    """Start a classification from a legacy defect label."""
    return migrate_legacy_type(legacy_type)
