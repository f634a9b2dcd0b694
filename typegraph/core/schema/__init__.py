"""
Schema descriptor build package.
"""

from .builder import build_type_registry

__all__ = ["build_type_registry"]
