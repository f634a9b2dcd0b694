"""
typegraph - compiles model declarations into GraphQL type descriptors.
"""

from .core.registry import (
    ArgumentDescriptor,
    DuplicateTypeError,
    FieldDescriptor,
    RegistryFrozenError,
    TypeCategory,
    TypeDescriptor,
    TypeRegistry,
)
from .core.scalars import ScalarKind, resolve_scalar
from .core.schema import build_type_registry
from .core.settings import CompilerSettings
from .defaults import LIBRARY_VERSION as __version__

__all__ = [
    "build_type_registry",
    "TypeRegistry",
    "TypeDescriptor",
    "FieldDescriptor",
    "ArgumentDescriptor",
    "TypeCategory",
    "ScalarKind",
    "resolve_scalar",
    "CompilerSettings",
    "DuplicateTypeError",
    "RegistryFrozenError",
]
