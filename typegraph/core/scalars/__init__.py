"""
Custom GraphQL scalars package.

This package implements the custom scalar types referenced by compiled
descriptors.
"""

from .json_scalar import JSON
from .kinds import SCALARS, ScalarKind, resolve_scalar
from .registry import (
    CUSTOM_SCALARS,
    get_custom_scalar,
    register_custom_scalar,
)
from .temporal import Date

__all__ = [
    "ScalarKind",
    "SCALARS",
    "resolve_scalar",
    # Scalars
    "Date",
    "JSON",
    # Registry functions
    "CUSTOM_SCALARS",
    "get_custom_scalar",
    "register_custom_scalar",
]
