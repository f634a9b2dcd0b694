"""
Internal utility functions for settings loading.
"""

from typing import Any, Dict

from django.conf import settings as django_settings


def _merge_settings_dicts(*dicts: dict[str, Any]) -> dict[str, Any]:
    """Merge multiple settings dictionaries with later ones taking precedence."""
    result = {}
    for d in dicts:
        if d: result.update(d)
    return result


def _get_global_settings() -> dict[str, Any]:
    """Get the ``TYPEGRAPH`` block from Django settings, if Django is configured."""
    if not django_settings.configured:
        return {}
    configured = getattr(django_settings, "TYPEGRAPH", None)
    if not isinstance(configured, dict):
        return {}
    return configured


def _get_library_defaults() -> dict[str, Any]:
    """Get library default settings."""
    from ...defaults import LIBRARY_DEFAULTS
    return LIBRARY_DEFAULTS
