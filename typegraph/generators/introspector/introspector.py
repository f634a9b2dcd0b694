"""
ModelIntrospector implementation.

Reads raw model descriptions, either mappings (as loaded from JSON model
files) or attribute objects, and normalizes them into ``ModelDefinition``
values.
"""

import logging
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional

from django.utils.functional import cached_property

from ...core.scalars import resolve_scalar
from .types import (
    AnonymousEmbedded,
    DeclaredType,
    ListOf,
    ModelDefinition,
    ModelReference,
    PropertyDeclaration,
    RelationDeclaration,
    RelationKind,
    ScalarType,
    UnsupportedType,
    UntypedArray,
)

logger = logging.getLogger(__name__)

ARRAY_TYPE_NAME = "array"

# Mapping of Python types to declared primitive names
PYTHON_TYPE_MAP = {
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    dict: "object",
    datetime: "date",
    date: "date",
}

_MISSING = object()


def _read(raw: Any, *names: str, default: Any = None) -> Any:
    """Read the first present key or attribute among ``names``."""
    for name in names:
        if isinstance(raw, Mapping):
            value = raw.get(name, _MISSING)
        else:
            value = getattr(raw, name, _MISSING)
        if value is not _MISSING:
            return value
    return default


def _model_name_of(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw
    if isinstance(raw, ModelDefinition):
        return raw.model_name
    name = _read(raw, "model_name", "modelName", "name")
    return str(name) if name else None


def parse_type(raw: Any) -> DeclaredType:
    """Normalize a declared property type into its ``DeclaredType`` variant."""
    if isinstance(raw, type) and raw in PYTHON_TYPE_MAP:
        return ScalarType(PYTHON_TYPE_MAP[raw])
    if raw is list:
        return UntypedArray()
    if isinstance(raw, (list, tuple)):
        if not raw:
            return UntypedArray()
        return ListOf(parse_type(raw[0]))
    if isinstance(raw, str):
        name = raw.strip()
        members = [part.strip() for part in name.split("|") if part.strip()]
        if len(members) == 1:
            name = members[0]
        if name.lower() == ARRAY_TYPE_NAME:
            return UntypedArray()
        if resolve_scalar(name):
            return ScalarType(name)
        return ModelReference(name)
    if isinstance(raw, Mapping):
        if "properties" in raw:
            return AnonymousEmbedded(
                raw_properties=raw["properties"],
                name=raw.get("name"),
                hidden=frozenset(raw.get("hidden") or ()),
            )
        return AnonymousEmbedded(raw_properties=raw)
    model_name = _model_name_of(raw)
    if model_name:
        return ModelReference(model_name)
    return UnsupportedType(getattr(raw, "__name__", repr(raw)))


def parse_property(name: str, raw: Any) -> PropertyDeclaration:
    """Build a property declaration from a mapping, an object or a bare type."""
    if isinstance(raw, Mapping):
        if "type" not in raw:
            return PropertyDeclaration(name=name, type=AnonymousEmbedded(raw_properties=raw))
    elif not hasattr(raw, "type") or isinstance(raw, (str, list, tuple, type)):
        return PropertyDeclaration(name=name, type=parse_type(raw))

    enum_values = _read(raw, "enum")
    default_fn = _read(raw, "default_fn", "defaultFn")
    return PropertyDeclaration(
        name=name,
        type=parse_type(_read(raw, "type")),
        required=bool(_read(raw, "required", default=False)),
        deprecated=bool(_read(raw, "deprecated", default=False)),
        enum=tuple(enum_values) if enum_values else None,
        default_fn=str(default_fn) if default_fn else None,
        description=_read(raw, "description"),
    )


def parse_properties(raw_properties: Mapping[str, Any]) -> Dict[str, PropertyDeclaration]:
    """Parse an ordered property mapping, keeping declaration order."""
    return {name: parse_property(name, raw) for name, raw in (raw_properties or {}).items()}


class ModelIntrospector:
    """
    Analyzes a raw model description to extract its declarations.
    """

    def __init__(self, raw_model: Any):
        self.raw_model = raw_model
        self._definition = _read(raw_model, "definition")

    def _read_definition(self, *names: str, default: Any = None) -> Any:
        value = _read(self.raw_model, *names, default=_MISSING)
        if value is _MISSING and self._definition is not None:
            value = _read(self._definition, *names, default=_MISSING)
        return default if value is _MISSING else value

    @cached_property
    def model_name(self) -> str:
        name = _model_name_of(self.raw_model)
        if not name:
            raise ValueError(f"Model description without a name: {self.raw_model!r}")
        return name

    @cached_property
    def plural_model_name(self) -> str:
        plural = _read(self.raw_model, "plural_model_name", "pluralModelName", "plural")
        if plural:
            return str(plural).strip()
        return f"{self.model_name}s"

    @cached_property
    def shared(self) -> bool:
        return bool(_read(self.raw_model, "shared", default=False))

    @cached_property
    def properties(self) -> Dict[str, PropertyDeclaration]:
        """Extracts declared properties."""
        return parse_properties(self._read_definition("properties", default={}))

    @cached_property
    def hidden(self) -> frozenset:
        hidden = _read(self.raw_model, "hidden", default=None)
        if hidden is None:
            settings = self._read_definition("settings", default={}) or {}
            hidden = _read(settings, "hidden", default=None)
        return frozenset(hidden or ())

    @cached_property
    def relations(self) -> Dict[str, RelationDeclaration]:
        """Extracts declared relations, skipping unknown relation kinds."""
        relations: Dict[str, RelationDeclaration] = {}
        raw_relations = _read(self.raw_model, "relations", default=None)
        if raw_relations is None:
            raw_relations = self._read_definition("relations", default={})
        for name, raw in (raw_relations or {}).items():
            try:
                kind = RelationKind.from_str(_read(raw, "type", default=""))
            except ValueError as e:
                logger.warning(f"Skipping relation {self.model_name}.{name}: {e}")
                continue
            relations[name] = RelationDeclaration(
                name=str(_read(raw, "name", default=name) or name),
                source=self.model_name,
                target=_model_name_of(_read(raw, "model_to", "modelTo", "model")),
                kind=kind,
                embed=bool(_read(raw, "embed", default=False)),
            )
        return relations

    def get_definition(self) -> ModelDefinition:
        return ModelDefinition(
            model_name=self.model_name,
            plural_model_name=self.plural_model_name,
            shared=self.shared,
            properties=self.properties,
            hidden=self.hidden,
            relations=self.relations,
            description=self._read_definition("description"),
        )


def load_models(raw_models: Iterable[Any]) -> list[ModelDefinition]:
    """Ingest a sequence of raw model descriptions, keeping their order."""
    models = []
    for raw in raw_models:
        if isinstance(raw, ModelDefinition):
            models.append(raw)
        else:
            models.append(ModelIntrospector(raw).get_definition())
    return models
