"""
taxonomy/legacy.py
------------------
Map legacy flat defect type strings to the hierarchical taxonomy.

Older defect records carry a single label ("Erosion", "Crack", ...).
This module converts them both ways:

- migrate_legacy_type(): label -> Classification. Exact (case-insensitive)
  table hits first, then keyword inference, then the default
  classification. Never fails.
- to_legacy_string(): Classification -> label, falling back to the full
  hierarchical path when no table entry matches.

Table entries are immutable LegacyTarget tuples built once at import.
Callers always receive a fresh Classification, so editing one never
reaches the table or another caller.
"""

import logging
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

from .classification import Classification
from .definitions import (
    AuxiliaryComponent,
    BladeMaterial,
    Category,
    LaminateDefectType,
    SurfaceDefectType,
    TopCoatDefectType,
    VortexGeneratorDefectType,
)
from .paths import get_full_path
from .subtypes import SurfaceDiscolorationSubtype, SurfaceErosionSubtype, TopCoatCrackSubtype

logger = logging.getLogger(__name__)


class LegacyTarget(NamedTuple):
    """Frozen classification fields for one legacy table entry."""
    category: Category
    material: Optional[BladeMaterial]
    component: Optional[AuxiliaryComponent]
    defect_type: int
    defect_subtype: Optional[int] = None

    def to_classification(self) -> Classification:
        return Classification(*self)

    def matches(self, classification: Classification) -> bool:
        """Same branch and defect type; the subtype is ignored."""
        return (
            self.category == classification.category
            and self.material == classification.material
            and self.component == classification.component
            and self.defect_type == classification.defect_type
        )


def _blade(material: BladeMaterial, defect_type, subtype=None) -> LegacyTarget:
    return LegacyTarget(Category.BLADE, material, None, defect_type, subtype)


def _component(component: AuxiliaryComponent, defect_type) -> LegacyTarget:
    return LegacyTarget(Category.AUXILIARY_COMPONENT, None, component, defect_type)


# Legacy label -> target, in lookup order for to_legacy_string()
LEGACY_MAPPING: Mapping[str, LegacyTarget] = MappingProxyType({
    "Erosion": _blade(BladeMaterial.SURFACE, SurfaceDefectType.EROSION),
    "Crack": _blade(BladeMaterial.TOP_COAT, TopCoatDefectType.CRACK),
    "Pinholes": _blade(BladeMaterial.TOP_COAT, TopCoatDefectType.PINHOLES),
    # Closest match; kept until the domain experts confirm a better home
    "Peeling": _blade(BladeMaterial.TOP_COAT, TopCoatDefectType.CRACK, TopCoatCrackSubtype.NONE),
    "Flaking": _blade(BladeMaterial.SURFACE, SurfaceDefectType.EROSION, SurfaceErosionSubtype.FLAKING),
    "Discoloration": _blade(BladeMaterial.SURFACE, SurfaceDefectType.DISCOLORATION),
    "Damaged or Misaligned": _component(
        AuxiliaryComponent.VORTEX_GENERATORS, VortexGeneratorDefectType.DAMAGED_OR_MISALIGNED
    ),
    "Other": _blade(BladeMaterial.SURFACE, SurfaceDefectType.DISCOLORATION),
})

# Case-insensitive key lookup
_LEGACY_KEYS: dict[str, str] = {key.casefold(): key for key in LEGACY_MAPPING}

# Keyword inference for labels missing from the table, first match wins
LEGACY_INFERENCE_RULES: tuple[tuple[tuple[str, ...], LegacyTarget], ...] = (
    (("crack",), _blade(BladeMaterial.TOP_COAT, TopCoatDefectType.CRACK)),
    (("erosion", "chip"), _blade(BladeMaterial.SURFACE, SurfaceDefectType.EROSION)),
    (("delamination",), _blade(BladeMaterial.LAMINATE, LaminateDefectType.DELAMINATION)),
)

DEFAULT_CLASSIFICATION: LegacyTarget = _blade(
    BladeMaterial.SURFACE,
    SurfaceDefectType.DISCOLORATION,
    SurfaceDiscolorationSubtype.MECHANICAL,
)


def get_default_classification() -> Classification:
    """Classification used for blank or unrecognisable legacy labels."""
    return DEFAULT_CLASSIFICATION.to_classification()


def _lookup(legacy_type: str) -> Optional[str]:
    return _LEGACY_KEYS.get(legacy_type.casefold())


def _is_blank(legacy_type) -> bool:
    return not isinstance(legacy_type, str) or not legacy_type.strip()


def infer_from_keywords(legacy_type: str) -> Optional[Classification]:
    """
    Infer a classification from keywords inside a free-form label.

    Returns:
        New classification from the first matching rule, or None
    """
    text = legacy_type.casefold()
    for keywords, target in LEGACY_INFERENCE_RULES:
        if any(keyword in text for keyword in keywords):
            return target.to_classification()
    return None


def migrate_legacy_type(legacy_type: Optional[str]) -> Classification:
    """
    Convert a legacy defect type string to a classification.

    Args:
        legacy_type: Legacy label; None/blank allowed

    Returns:
        A new Classification (never shared with other callers)
    """
    if _is_blank(legacy_type):
        return get_default_classification()

    key = _lookup(legacy_type)
    if key is not None:
        return LEGACY_MAPPING[key].to_classification()

    inferred = infer_from_keywords(legacy_type)
    if inferred is not None:
        logger.debug(f"Inferred {get_full_path(inferred)} from legacy type {legacy_type!r}")
        return inferred

    logger.debug(f"Unrecognized legacy type {legacy_type!r}, using default classification")
    return get_default_classification()


def to_legacy_string(classification: Classification) -> str:
    """
    Convert a classification back to a legacy label.

    The first table entry with the same category, material, component and
    defect type wins (the subtype is ignored). Without a match the full
    hierarchical path is returned.
    """
    for key, target in LEGACY_MAPPING.items():
        if target.matches(classification):
            return key

    return get_full_path(classification)


def is_recognized_legacy_type(legacy_type: Optional[str]) -> bool:
    """True only for exact (case-insensitive) table keys; keyword inference does not count."""
    return not _is_blank(legacy_type) and _lookup(legacy_type) is not None


def get_legacy_type_names() -> tuple[str, ...]:
    """All legacy labels in table order."""
    return tuple(LEGACY_MAPPING)
