"""
Descriptor dataclasses stored in the type registry.

A compilation run produces three kinds of descriptors:

- ``TypeDescriptor`` with category OBJECT (models, anonymous embedded
  structures and the aggregate root), ENUM (enumerated properties) or UNION
  (pipe-delimited model references).
- ``FieldDescriptor``, one per exposed property or relation of an OBJECT.
- ``ArgumentDescriptor``, one per argument a connection field accepts.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ..scalars import ScalarKind


class TypeCategory(Enum):
    """Category of a registered type."""

    OBJECT = "OBJECT"
    ENUM = "ENUM"
    UNION = "UNION"


@dataclass
class ArgumentDescriptor:
    """An argument accepted by a field."""
    type_name: str
    description: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.type_name, "description": self.description}


@dataclass
class FieldDescriptor:
    """Describes one field of an OBJECT type."""
    name: str
    type_name: Optional[str] = None
    is_list: bool = False
    is_scalar: bool = False
    scalar_kind: Optional[ScalarKind] = None
    is_relation: bool = False
    is_connection: bool = False
    relation_kind: Optional[str] = None
    embed: bool = False
    is_required: bool = False
    is_hidden: bool = False
    nested_type_name: Optional[str] = None
    description: Optional[str] = None
    args: Dict[str, ArgumentDescriptor] = field(default_factory=dict)
    resolve: Optional[Callable[..., Any]] = field(default=None, compare=False, repr=False)
    generated: bool = field(default=False, compare=False)

    def as_dict(self) -> dict[str, Any]:
        """JSON-ready representation; the resolution rule is not exported."""
        return {
            "type": self.type_name,
            "list": self.is_list,
            "scalar": self.is_scalar,
            "scalar_kind": self.scalar_kind.value if self.scalar_kind else None,
            "relation": self.is_relation,
            "connection": self.is_connection,
            "relation_kind": self.relation_kind,
            "embed": self.embed,
            "required": self.is_required,
            "hidden": self.is_hidden,
            "nested_type": self.nested_type_name,
            "description": self.description,
            "args": {name: arg.as_dict() for name, arg in self.args.items()},
        }


@dataclass
class TypeDescriptor:
    """A named type: an object with fields, an enum or a union."""
    name: str
    category: TypeCategory
    description: Optional[str] = None
    fields: Dict[str, FieldDescriptor] = field(default_factory=dict)
    values: tuple = ()
    scalar_kind: Optional[ScalarKind] = None
    members: tuple = ()
    input: bool = False
    generated: bool = field(default=False, compare=False)

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
        }
        if self.category is TypeCategory.OBJECT:
            payload["input"] = self.input
            payload["fields"] = {name: f.as_dict() for name, f in self.fields.items()}
        elif self.category is TypeCategory.ENUM:
            payload["values"] = list(self.values)
            payload["scalar_kind"] = self.scalar_kind.value if self.scalar_kind else None
        else:
            payload["members"] = list(self.members)
        return payload
