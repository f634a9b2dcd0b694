"""
Settings package for typegraph.
"""

from .compiler_settings import CompilerSettings

__all__ = [
    "CompilerSettings",
]
