"""
Type Generation System Package.

This package provides the TypeGenerator class, which is responsible for
converting model declarations into type descriptors.
"""

from .enums import build_enum_type, build_type_name
from .generator import TypeGenerator
from .properties import PropertyResult, compile_property, make_property_resolver
from .relations import (
    RelationLookup,
    build_connection_arguments,
    compile_relation,
    make_connection_resolver,
)
from .viewer import generate_viewer

__all__ = [
    "TypeGenerator",
    "build_type_name",
    "build_enum_type",
    "PropertyResult",
    "compile_property",
    "make_property_resolver",
    "RelationLookup",
    "build_connection_arguments",
    "compile_relation",
    "make_connection_resolver",
    "generate_viewer",
]
