"""
Type registry package.
"""

from .registry import DuplicateTypeError, RegistryFrozenError, TypeRegistry
from .types import ArgumentDescriptor, FieldDescriptor, TypeCategory, TypeDescriptor

__all__ = [
    "TypeRegistry",
    "RegistryFrozenError",
    "DuplicateTypeError",
    "TypeDescriptor",
    "FieldDescriptor",
    "ArgumentDescriptor",
    "TypeCategory",
]
