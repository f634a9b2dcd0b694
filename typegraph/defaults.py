"""
Default configuration for the typegraph library.

Every setting consumed by the compiler lives here. Each section mirrors one
of the dataclasses defined in ``typegraph.core.settings``.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"


# --------------------------------------------------------------------------- #
# Library-wide defaults (grouped by feature area)
# --------------------------------------------------------------------------- #
LIBRARY_DEFAULTS: dict[str, Any] = {
    "compiler_settings": {
        "root_type_name": "Viewer",
        "root_type_description": "Viewer",
        "max_embed_depth": 8,
        "relation_filter_argument": "active",
        "relation_lookup": None,
        "warn_unresolved_types": True,
    },
}

