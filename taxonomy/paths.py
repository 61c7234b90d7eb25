"""
taxonomy/paths.py
-----------------
Human-readable rendering of classifications.

    get_full_path(c)            -> "Blade > Surface > Erosion > Chip"
    get_defect_type_string(c)   -> "Erosion"
    get_defect_subtype_string(c) -> "Chip"  (None when there is no subtype)
    get_defect_type_display(c)  -> "Erosion - Chip"
"""

from typing import Optional

from .classification import Classification
from .config import TAXONOMY_CONFIG
from .definitions import BladeMaterial, Category, get_defect_type_enum
from .subtypes import get_subtype_enum, is_no_subtype


def _name(value) -> str:
    return value.value if hasattr(value, "value") else str(value)


def get_defect_type_string(classification: Classification, config=None) -> str:
    """
    Resolve the defect type code to its display name.

    Returns the configured sentinel ("Unknown" for blade defects, "Other"
    for auxiliary components) when the code is not part of the branch
    enumeration or the branch is unresolved.
    """
    config = config or TAXONOMY_CONFIG
    c = classification

    enum_cls = get_defect_type_enum(c.category, c.material, c.component)
    if enum_cls is None:
        return config.unknown_defect_type

    member = enum_cls.from_code(c.defect_type)
    if member is not None:
        return member.display

    if c.category is Category.AUXILIARY_COMPONENT:
        return config.unknown_component_defect_type
    return config.unknown_defect_type


def get_defect_subtype_string(classification: Classification) -> Optional[str]:
    """
    Resolve the subtype code to its display name.

    Returns None when there is no subtype (None or 0), when the
    (material, defect type) pair has no subtype enumeration, or when the
    code is not part of it.
    """
    c = classification
    if is_no_subtype(c.defect_subtype):
        return None
    if c.category is not Category.BLADE or not isinstance(c.material, BladeMaterial):
        return None

    subtype_enum = get_subtype_enum(c.material, c.defect_type)
    if subtype_enum is None:
        return None

    member = subtype_enum.from_code(c.defect_subtype)
    return member.display if member is not None else None


def get_path_parts(classification: Classification, config=None) -> list[str]:
    """Individual level strings, root first (3 or 4 entries)."""
    c = classification
    parts = [_name(c.category)]

    if c.category is Category.BLADE and c.material is not None:
        parts.append(_name(c.material))
    elif c.category is Category.AUXILIARY_COMPONENT and c.component is not None:
        parts.append(_name(c.component))

    parts.append(get_defect_type_string(c, config))

    subtype = get_defect_subtype_string(c)
    if subtype:
        parts.append(subtype)

    return parts


def get_full_path(classification: Classification, config=None) -> str:
    """Full hierarchical path, e.g. "Blade > Surface > Erosion > Chip"."""
    config = config or TAXONOMY_CONFIG
    return config.path_separator.join(get_path_parts(classification, config))


def get_defect_type_display(classification: Classification, config=None) -> str:
    """Short display for tables: "Erosion - Chip", or just "Erosion"."""
    config = config or TAXONOMY_CONFIG
    defect_type = get_defect_type_string(classification, config)
    subtype = get_defect_subtype_string(classification)
    if subtype:
        return f"{defect_type}{config.display_separator}{subtype}"
    return defect_type
