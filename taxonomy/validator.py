"""
taxonomy/validator.py
---------------------
Structural validation of defect classifications.

A classification is valid when it is a legal path through the taxonomy
tree. validate() never raises: every violated rule is reported as a
human-readable message so the caller can show them next to the form
fields and decide whether to block saving.

Rules (all checked, all reported):
1. Category selects exactly one level 1 value: Blade needs a material and
   no component, AuxiliaryComponent needs a component and no material.
2. The defect type must belong to the material/component enumeration.
3. A subtype other than None/0 must belong to the (material, defect type)
   subtype enumeration; pairs without one accept only None/0.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .classification import Classification
from .definitions import (
    AuxiliaryComponent,
    BladeMaterial,
    Category,
    COMPONENT_DEFECT_TYPES,
    DefectCode,
    MATERIAL_DEFECT_TYPES,
    get_valid_defect_types,
)
from .subtypes import get_subtype_enum, is_no_subtype

logger = logging.getLogger(__name__)

__all__ = ["ValidationResult", "validate", "get_valid_defect_types"]


@dataclass
class ValidationResult:
    """Outcome of validate(): is_valid is True exactly when errors is empty."""
    is_valid: bool
    errors: list[str] = field(default_factory=list)


def validate(classification: Classification) -> ValidationResult:
    """
    Validate a classification against the hierarchical schema.

    Args:
        classification: Classification to check (not modified)

    Returns:
        ValidationResult listing every violated rule
    """
    errors: list[str] = []

    category = getattr(classification, "category", None)
    material = getattr(classification, "material", None)
    component = getattr(classification, "component", None)

    if category is Category.BLADE:
        if material is None:
            errors.append("BladeMaterial is required when Category is Blade")
        elif not isinstance(material, BladeMaterial):
            errors.append(f"Invalid BladeMaterial {material!r}")
        else:
            _validate_blade_defect(classification, material, errors)

        if component is not None:
            errors.append("AuxiliaryComponentType should be null when Category is Blade")

    elif category is Category.AUXILIARY_COMPONENT:
        if component is None:
            errors.append("AuxiliaryComponentType is required when Category is AuxiliaryComponent")
        elif not isinstance(component, AuxiliaryComponent):
            errors.append(f"Invalid AuxiliaryComponentType {component!r}")
        else:
            _validate_component_defect(classification, component, errors)

        if material is not None:
            errors.append("BladeMaterial should be null when Category is AuxiliaryComponent")

    else:
        errors.append(f"Invalid Category {category!r}")

    if errors:
        logger.debug(f"Invalid classification {classification}: {errors}")

    return ValidationResult(is_valid=not errors, errors=errors)


def _code_text(value) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(int(value))
    return repr(value)


def _resolve_defect_type(
    enum_cls: type[DefectCode],
    defect_type,
    owner: str,
    errors: list[str],
) -> Optional[DefectCode]:
    member = enum_cls.from_code(defect_type)
    if member is None:
        message = f"Invalid DefectType {_code_text(defect_type)} for {owner}"
        if isinstance(defect_type, DefectCode):
            message += f" ({type(defect_type).__name__}.{defect_type.name} belongs to another branch)"
        errors.append(message)
    return member


def _validate_blade_defect(
    classification: Classification,
    material: BladeMaterial,
    errors: list[str],
) -> None:
    enum_cls = MATERIAL_DEFECT_TYPES[material]
    defect_type = _resolve_defect_type(
        enum_cls, classification.defect_type, f"{material.value} material", errors
    )
    if defect_type is None:
        # No resolved pair to check the subtype against
        return

    subtype = classification.defect_subtype
    if is_no_subtype(subtype):
        return

    pair = f"{material.value} > {defect_type.display}"
    subtype_enum = get_subtype_enum(material, defect_type)

    if subtype_enum is None:
        errors.append(f"DefectSubtype should be null or 0 for {pair}")
    elif subtype_enum.from_code(subtype) is None:
        errors.append(f"Invalid DefectSubtype {_code_text(subtype)} for {pair}")


def _validate_component_defect(
    classification: Classification,
    component: AuxiliaryComponent,
    errors: list[str],
) -> None:
    enum_cls = COMPONENT_DEFECT_TYPES[component]
    _resolve_defect_type(enum_cls, classification.defect_type, component.value, errors)

    # Auxiliary components never have subtypes
    if not is_no_subtype(classification.defect_subtype):
        errors.append("DefectSubtype should be null or 0 for AuxiliaryComponent defects")
