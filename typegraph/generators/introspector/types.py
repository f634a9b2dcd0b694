"""
Data structures for ingested model declarations.

Declared property types are normalized once, at ingestion, into one of the
``DeclaredType`` variants below so the property compiler dispatches on an
explicit tag instead of inspecting raw shapes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class ScalarType:
    """A primitive type name known to the scalar table (``string``, ``date``...)."""
    name: str


@dataclass(frozen=True)
class UntypedArray:
    """The generic array of untyped values."""


@dataclass(frozen=True)
class ListOf:
    """A list of some other declared type."""
    item: "DeclaredType"


@dataclass(frozen=True)
class UnsupportedType:
    """A declared type with no descriptor counterpart (binary buffers, decimals...)."""
    name: str


@dataclass(frozen=True)
class ModelReference:
    """A reference to another model, or to several when pipe-delimited."""
    name: str

    @property
    def union_members(self) -> Tuple[str, ...]:
        return tuple(part.strip() for part in self.name.split("|") if part.strip())

    @property
    def is_union(self) -> bool:
        return len(self.union_members) > 1


@dataclass(frozen=True)
class AnonymousEmbedded:
    """An inline structure with its own nested property declarations.

    Nested declarations are kept raw and parsed when the compiler descends
    into them, so the compiler's depth limit also guards against cyclic input.
    """
    raw_properties: Mapping[str, Any] = field(hash=False)
    name: Optional[str] = None
    hidden: FrozenSet[str] = frozenset()

    @property
    def properties(self) -> Dict[str, "PropertyDeclaration"]:
        from .introspector import parse_properties
        return parse_properties(self.raw_properties)


DeclaredType = Union[ScalarType, UntypedArray, ListOf, ModelReference, AnonymousEmbedded, UnsupportedType]


@dataclass(frozen=True)
class PropertyDeclaration:
    """One declared property of a model or anonymous structure."""
    name: str
    type: DeclaredType
    required: bool = False
    deprecated: bool = False
    enum: Optional[Tuple[Any, ...]] = None
    default_fn: Optional[str] = None
    description: Optional[str] = None


class RelationKind(Enum):
    """Relation kinds a model may declare."""

    HAS_MANY = "hasMany"
    HAS_ONE = "hasOne"
    BELONGS_TO = "belongsTo"
    HAS_MANY_THROUGH = "hasManyThrough"
    HAS_AND_BELONGS_TO_MANY = "hasAndBelongsToMany"
    EMBEDS_ONE = "embedsOne"
    EMBEDS_MANY = "embedsMany"
    REFERENCES_MANY = "referencesMany"

    @property
    def is_embedded(self) -> bool:
        return self in (RelationKind.EMBEDS_ONE, RelationKind.EMBEDS_MANY)

    @property
    def is_many(self) -> bool:
        return self not in (
            RelationKind.HAS_ONE,
            RelationKind.BELONGS_TO,
            RelationKind.EMBEDS_ONE,
        )

    @classmethod
    def from_str(cls, value: str) -> "RelationKind":
        """Convert a declared relation type, ignoring case.

        Raises:
            ValueError: If value is not a known relation kind
        """
        normalized = str(value).strip().lower()
        for kind in cls:
            if kind.value.lower() == normalized:
                return kind
        valid = [k.value for k in cls]
        raise ValueError(f"Invalid relation kind '{value}'. Valid kinds: {valid}")


@dataclass(frozen=True)
class RelationDeclaration:
    """A named relation from one model to another."""
    name: str
    source: str
    target: Optional[str]
    kind: RelationKind
    embed: bool = False


@dataclass(frozen=True)
class ModelDefinition:
    """A fully ingested model description."""
    model_name: str
    plural_model_name: str
    shared: bool = False
    properties: Dict[str, PropertyDeclaration] = field(default_factory=dict, hash=False)
    hidden: FrozenSet[str] = frozenset()
    relations: Dict[str, RelationDeclaration] = field(default_factory=dict, hash=False)
    description: Optional[str] = None
