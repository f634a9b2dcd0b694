"""
Model declaration ingestion package.
"""

from .introspector import ModelIntrospector, load_models, parse_properties, parse_property, parse_type
from .types import (
    AnonymousEmbedded,
    DeclaredType,
    ListOf,
    ModelDefinition,
    ModelReference,
    PropertyDeclaration,
    RelationDeclaration,
    RelationKind,
    ScalarType,
    UnsupportedType,
    UntypedArray,
)

__all__ = [
    "ModelIntrospector",
    "load_models",
    "parse_type",
    "parse_property",
    "parse_properties",
    "DeclaredType",
    "ScalarType",
    "UntypedArray",
    "UnsupportedType",
    "ListOf",
    "ModelReference",
    "AnonymousEmbedded",
    "PropertyDeclaration",
    "RelationDeclaration",
    "RelationKind",
    "ModelDefinition",
]
