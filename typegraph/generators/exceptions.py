"""
Custom exceptions for descriptor generators.

This module defines specific exception types for better error handling
and debugging in type compilation and relation resolution.
"""

from typing import Optional


class TypeGeneratorError(Exception):
    """Base exception for type generator errors."""

    def __init__(self, message: str, model_name: Optional[str] = None):
        self.model_name = model_name
        super().__init__(message)


class PropertyCompilationError(TypeGeneratorError):
    """Raised when a property declaration cannot be compiled."""

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ):
        self.field_name = field_name
        super().__init__(message, model_name)


class EmbedDepthError(PropertyCompilationError):
    """Raised when anonymous embedded structures nest deeper than allowed."""

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        field_name: Optional[str] = None,
        depth: Optional[int] = None,
        max_depth: Optional[int] = None,
    ):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(message, model_name, field_name)


class RelationLookupError(TypeGeneratorError):
    """Raised when a relation cannot be resolved at query time."""

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        relation_name: Optional[str] = None,
    ):
        self.relation_name = relation_name
        super().__init__(message, model_name)
