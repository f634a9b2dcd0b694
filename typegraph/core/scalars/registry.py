"""
Registry for custom GraphQL scalars.
"""

from typing import Optional

from .json_scalar import JSON
from .temporal import Date

# Registry of custom scalars
CUSTOM_SCALARS = {
    'JSON': JSON,
    'Date': Date,
}


def get_custom_scalar(scalar_name: str) -> Optional[type]:
    """
    Get custom scalar class by name.

    Args:
        scalar_name: Name of the scalar

    Returns:
        Scalar class or None if not found
    """
    return CUSTOM_SCALARS.get(scalar_name)


def register_custom_scalar(name: str, scalar_class: type) -> None:
    """
    Register a custom scalar.

    Args:
        name: Name of the scalar
        scalar_class: Scalar class
    """
    CUSTOM_SCALARS[name] = scalar_class
