"""
taxonomy/classification.py
--------------------------
The hierarchical classification attached to a defect record.

A Classification is not validated on construction: partially filled or
inconsistent instances are normal while a user is building one. Run
taxonomy.validator.validate() before attaching it to a defect.
"""

import math
from dataclasses import dataclass, replace
from typing import Any, Optional, Union

from .definitions import (
    AuxiliaryComponent,
    BladeMaterial,
    Category,
    parse_category,
    parse_component,
    parse_material,
)


@dataclass
class Classification:
    """
    One point in the defect taxonomy tree.

    Attributes:
        category: Blade or AuxiliaryComponent
        material: Blade material (Category.BLADE only)
        component: Auxiliary component (Category.AUXILIARY_COMPONENT only)
        defect_type: Defect type code, interpreted through the enum of the
            material/component branch
        defect_subtype: Optional subtype code; None or 0 means "no subtype"
    """
    category: Category = Category.BLADE
    material: Optional[BladeMaterial] = None
    component: Optional[AuxiliaryComponent] = None
    defect_type: int = 0
    defect_subtype: Optional[int] = None

    @property
    def branch(self) -> Union[BladeMaterial, AuxiliaryComponent, None]:
        """The level 1 value selected by the category."""
        if self.category is Category.BLADE:
            return self.material
        if self.category is Category.AUXILIARY_COMPONENT:
            return self.component
        return None

    def copy(self) -> "Classification":
        """Independent copy (all fields are immutable values)."""
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with enum names and integer codes."""
        return {
            "category": _enum_value(self.category),
            "material": _enum_value(self.material),
            "component": _enum_value(self.component),
            "defect_type": _int_or_raw(self.defect_type),
            "defect_subtype": _int_or_raw(self.defect_subtype),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Classification":
        """
        Build a classification from names and codes (CLI flags, CSV rows).

        Blank values (None, "", NaN) become None. Enum names follow
        parse_category / parse_material / parse_component.

        Raises:
            ValueError: On unknown enum names or non-integer codes
        """
        category = data.get("category")
        material = data.get("material")
        component = data.get("component")
        subtype = data.get("defect_subtype")

        return cls(
            category=Category.BLADE if _is_blank(category) else parse_category(category),
            material=None if _is_blank(material) else parse_material(material),
            component=None if _is_blank(component) else parse_component(component),
            defect_type=_parse_code(data.get("defect_type"), "defect_type", default=0),
            defect_subtype=None if _is_blank(subtype) else _parse_code(subtype, "defect_subtype"),
        )


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def _enum_value(value):
    return value.value if hasattr(value, "value") and not isinstance(value, int) else value


def _int_or_raw(value):
    if isinstance(value, int) and not isinstance(value, bool):
        return int(value)
    return value


def _parse_code(value, field_name: str, default: Optional[int] = None) -> Optional[int]:
    if _is_blank(value):
        return default
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be an integer code, got {value!r}")
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field_name} must be an integer code, got {value!r}")
        return int(value)
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"{field_name} must be an integer code, got {value!r}") from None
