"""
TypeGenerator implementation.
"""

import logging
from typing import Dict, Iterable, Optional

from django.utils.module_loading import import_string

from ...core.registry import TypeCategory, TypeDescriptor, TypeRegistry
from ...core.settings import CompilerSettings
from ..introspector import ModelDefinition, RelationDeclaration
from .properties import compile_property
from .relations import RelationLookup, compile_relation, missing_relation_lookup
from .viewer import generate_viewer

logger = logging.getLogger(__name__)


class TypeGenerator:
    """
    Generates type descriptors for a set of models into one registry.
    """

    def __init__(
        self,
        models: Iterable[ModelDefinition],
        registry: Optional[TypeRegistry] = None,
        settings: Optional[CompilerSettings] = None,
        relation_lookup: Optional[RelationLookup] = None,
    ):
        self.models = list(models)
        self.registry = registry if registry is not None else TypeRegistry()

        if settings is None:
            self.settings = CompilerSettings.from_settings()
        else:
            self.settings = settings

        self.relation_lookup = relation_lookup or self._load_relation_lookup()

        self._models_by_name: Dict[str, ModelDefinition] = {}
        for model in self.models:
            self._models_by_name.setdefault(model.model_name, model)
        self._known_models = frozenset(self._models_by_name)
        self._compiled: set[str] = set()

    def _load_relation_lookup(self) -> RelationLookup:
        """Import the configured relation lookup, if any."""
        if self.settings.relation_lookup:
            return import_string(self.settings.relation_lookup)
        return missing_relation_lookup

    def _get_shared_relations(self, model: ModelDefinition) -> list[RelationDeclaration]:
        """Relations whose target is a shared model of this run."""
        shared = []
        for relation in model.relations.values():
            target = self._models_by_name.get(relation.target) if relation.target else None
            if target is not None and target.shared:
                shared.append(relation)
        return shared

    def generate_object_type(self, model: ModelDefinition) -> TypeDescriptor:
        """
        Compile a model's properties and shared relations and register
        its object type along with every type the properties require.
        """
        if model.model_name in self._compiled:
            logger.warning(f"Model {model.model_name} already compiled, skipping duplicate")
            return self.registry[model.model_name]

        fields = {}
        for declaration in model.properties.values():
            result = compile_property(
                model.model_name,
                declaration,
                settings=self.settings,
                known_models=self._known_models,
                hidden=model.hidden,
                model_name=model.model_name,
            )
            self.registry.merge(result.types)
            if result.field is not None:
                fields[result.field.name] = result.field

        for relation in self._get_shared_relations(model):
            fields[relation.name] = compile_relation(
                relation, settings=self.settings, lookup=self.relation_lookup
            )

        object_type = TypeDescriptor(
            name=model.model_name,
            category=TypeCategory.OBJECT,
            description=model.description,
            fields=fields,
            input=True,
        )
        self._compiled.add(model.model_name)
        logger.debug(f"Compiled model {model.model_name} with {len(fields)} fields")
        return self.registry.register(object_type)

    def generate_root_type(self) -> TypeDescriptor:
        """Register the aggregate root type for the shared models."""
        return self.registry.register(generate_viewer(self.models, self.settings))
