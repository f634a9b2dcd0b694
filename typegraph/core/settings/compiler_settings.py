"""
CompilerSettings implementation.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .base import _get_global_settings, _get_library_defaults, _merge_settings_dicts


@dataclass
class CompilerSettings:
    """Settings for controlling descriptor compilation."""
    root_type_name: str = "Viewer"
    root_type_description: str = "Viewer"
    max_embed_depth: int = 8
    relation_filter_argument: str = "active"
    relation_lookup: Optional[str] = None
    warn_unresolved_types: bool = True

    @classmethod
    def from_settings(cls, **overrides: Any) -> "CompilerSettings":
        defaults = _get_library_defaults().get("compiler_settings", {})
        global_settings = _get_global_settings().get("compiler_settings", {})
        merged = _merge_settings_dicts(defaults, global_settings, overrides)
        valid_fields = set(cls.__dataclass_fields__.keys())
        return cls(**{k: v for k, v in merged.items() if k in valid_fields})
