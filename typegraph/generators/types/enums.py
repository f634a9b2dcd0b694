"""
Enum and derived-name helpers.
"""

from typing import Any, Iterable, Optional

from ...core.registry import TypeCategory, TypeDescriptor
from ...core.scalars import ScalarKind


def build_type_name(owner_name: str, field_name: str) -> str:
    """
    Purpose: Build the stable name of a type derived from a field
    (enum, union or anonymous embedded structure).
    """
    return f"{owner_name}_{field_name}"


def build_enum_type(
    owner_name: str,
    field_name: str,
    values: Iterable[Any],
    scalar_kind: Optional[ScalarKind] = None,
) -> TypeDescriptor:
    """
    Purpose: Create the ENUM descriptor for a property with enumerated values.
    Values keep their declared order; duplicates are dropped.
    """
    ordered: list = []
    for value in values:
        if value not in ordered:
            ordered.append(value)
    return TypeDescriptor(
        name=build_type_name(owner_name, field_name),
        category=TypeCategory.ENUM,
        values=tuple(ordered),
        scalar_kind=scalar_kind,
    )
