"""
Registry build entry point.
"""

import logging
from typing import Any, Iterable, Optional

from ...generators.introspector import load_models
from ...generators.types import RelationLookup, TypeGenerator
from ..registry import TypeRegistry
from ..settings import CompilerSettings

logger = logging.getLogger(__name__)


def build_type_registry(
    models: Iterable[Any],
    *,
    settings: Optional[CompilerSettings] = None,
    relation_lookup: Optional[RelationLookup] = None,
) -> TypeRegistry:
    """
    Compile a list of model descriptions into a frozen type registry.

    Each call starts from an empty registry; nothing is shared between runs.

    Args:
        models: Raw model descriptions or ``ModelDefinition`` values
        settings: Compiler settings, resolved from Django settings when omitted
        relation_lookup: Collaborator fetching related instances at query time

    Returns:
        The frozen registry, ready for the schema execution layer
    """
    definitions = load_models(models)
    registry = TypeRegistry()
    generator = TypeGenerator(
        definitions,
        registry=registry,
        settings=settings,
        relation_lookup=relation_lookup,
    )

    generator.generate_root_type()
    for model in definitions:
        generator.generate_object_type(model)

    registry.freeze()
    logger.info(f"Built type registry for {len(definitions)} models")
    return registry
