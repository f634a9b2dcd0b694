"""
Canonical scalar kinds produced by the compiler.
"""

from enum import Enum
from typing import Any, Optional

import graphene

from .registry import get_custom_scalar


class ScalarKind(Enum):
    """Closed set of scalar output types a declared primitive can map to."""

    JSON = "JSON"
    FLOAT = "Float"
    STRING = "String"
    BOOLEAN = "Boolean"
    ID = "ID"
    DATE = "Date"

    @property
    def graphene_type(self) -> type:
        """Graphene scalar class the execution layer should build this kind with."""
        return get_custom_scalar(self.value) or _BUILTIN_TYPES[self]


_BUILTIN_TYPES = {
    ScalarKind.FLOAT: graphene.Float,
    ScalarKind.STRING: graphene.String,
    ScalarKind.BOOLEAN: graphene.Boolean,
    ScalarKind.ID: graphene.ID,
}


# Declared primitive type names (and default-value generator names) mapped
# to the scalar kind they compile to.
SCALARS = {
    "any": ScalarKind.JSON,
    "number": ScalarKind.FLOAT,
    "string": ScalarKind.STRING,
    "boolean": ScalarKind.BOOLEAN,
    "objectid": ScalarKind.ID,
    "date": ScalarKind.DATE,
    "object": ScalarKind.JSON,
    "now": ScalarKind.DATE,
    "guid": ScalarKind.ID,
    "uuid": ScalarKind.ID,
    "uuidv4": ScalarKind.ID,
}


def resolve_scalar(name: Any) -> Optional[ScalarKind]:
    """Return the scalar kind for a declared name, or None when it is not a scalar."""
    if not isinstance(name, str):
        return None
    return SCALARS.get(name.strip().lower())
