"""
Property compilation.

Turns one declared property into a field descriptor plus the descriptors it
needs minted (enums, unions, anonymous embedded objects). Compilation is
pure: nothing is registered here, the caller merges the returned types.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import Any, Callable, FrozenSet, List, Optional

from ...core.registry import FieldDescriptor, TypeCategory, TypeDescriptor
from ...core.scalars import ScalarKind, resolve_scalar
from ...core.settings import CompilerSettings
from ..exceptions import EmbedDepthError
from ..introspector import (
    AnonymousEmbedded,
    DeclaredType,
    ListOf,
    ModelReference,
    PropertyDeclaration,
    ScalarType,
    UntypedArray,
)
from .enums import build_enum_type, build_type_name

logger = logging.getLogger(__name__)

TIMESTAMP_GENERATOR = "now"


@dataclass
class PropertyResult:
    """A compiled field (None when the property is omitted) and newly minted types."""
    field: Optional[FieldDescriptor] = None
    types: List[TypeDescriptor] = dataclass_field(default_factory=list)


def make_property_resolver(field_name: str) -> Callable[..., Any]:
    """Identity resolver reading ``field_name`` from a mapping or an object."""

    def resolve(source: Any, args: Any = None, context: Any = None) -> Any:
        if source is None:
            return None
        if isinstance(source, Mapping):
            return source.get(field_name)
        return getattr(source, field_name, None)

    return resolve


def _classify_scalar(declared: DeclaredType, default_fn: Optional[str]) -> Optional[ScalarKind]:
    if default_fn:
        generated = resolve_scalar(default_fn)
        if generated is not None:
            return generated
        logger.debug(f"Default generator '{default_fn}' has no scalar mapping, using declared type")
    if isinstance(declared, ScalarType):
        return resolve_scalar(declared.name)
    if isinstance(declared, UntypedArray):
        return ScalarKind.JSON
    return None


def _warn_unresolved(settings: CompilerSettings, owner_name: str, field_name: str, type_label: str) -> None:
    if settings.warn_unresolved_types:
        logger.warning(
            f"Skipping {owner_name}.{field_name}: type '{type_label}' is neither a scalar nor a known model"
        )


def compile_property(
    owner_name: str,
    declaration: PropertyDeclaration,
    *,
    settings: CompilerSettings,
    known_models: FrozenSet[str] = frozenset(),
    hidden: FrozenSet[str] = frozenset(),
    depth: int = 0,
    model_name: Optional[str] = None,
) -> PropertyResult:
    """
    Compile one property of the type ``owner_name``.

    Args:
        owner_name: Name of the owning type (a model or a derived anonymous type)
        declaration: The ingested property declaration
        settings: Compiler settings (embed depth limit, warnings)
        known_models: Names of the models in this compilation run
        hidden: Field names hidden on the owning type
        depth: Anonymous nesting level of the owning type
        model_name: Root model name, reported in errors

    Returns:
        PropertyResult with the field and the types it requires

    Raises:
        EmbedDepthError: If anonymous structures nest deeper than allowed
    """
    field_name = declaration.name
    if declaration.deprecated:
        logger.debug(f"Skipping deprecated property {owner_name}.{field_name}")
        return PropertyResult()

    compiled = FieldDescriptor(
        name=field_name,
        is_required=declaration.required,
        is_hidden=field_name in hidden,
        description=declaration.description,
        resolve=make_property_resolver(field_name),
    )

    declared = declaration.type
    if isinstance(declared, UntypedArray):
        compiled.is_list = True
        compiled.is_scalar = True
        compiled.scalar_kind = ScalarKind.JSON
        compiled.type_name = ScalarKind.JSON.value
        return PropertyResult(compiled)

    if isinstance(declared, ListOf):
        compiled.is_list = True
        declared = declared.item

    derived_name = build_type_name(owner_name, field_name)
    is_reference = isinstance(declared, (ModelReference, AnonymousEmbedded))

    if not is_reference or declaration.default_fn == TIMESTAMP_GENERATOR:
        scalar = _classify_scalar(declared, declaration.default_fn)
        if scalar is None:
            _warn_unresolved(settings, owner_name, field_name, getattr(declared, "name", repr(declared)))
            return PropertyResult()
        if declaration.enum:
            enum_type = build_enum_type(owner_name, field_name, declaration.enum, scalar)
            compiled.type_name = enum_type.name
            compiled.nested_type_name = enum_type.name
            return PropertyResult(compiled, [enum_type])
        compiled.is_scalar = True
        compiled.scalar_kind = scalar
        compiled.type_name = scalar.value
        return PropertyResult(compiled)

    if isinstance(declared, ModelReference):
        if declared.is_union:
            members: list[str] = []
            for part in declared.union_members:
                kind = resolve_scalar(part)
                if kind is not None:
                    member = kind.value
                elif part in known_models:
                    member = part
                else:
                    _warn_unresolved(settings, owner_name, field_name, part)
                    return PropertyResult()
                if member not in members:
                    members.append(member)
            union_type = TypeDescriptor(
                name=derived_name,
                category=TypeCategory.UNION,
                members=tuple(members),
            )
            compiled.type_name = union_type.name
            compiled.nested_type_name = union_type.name
            return PropertyResult(compiled, [union_type])

        if declared.name not in known_models:
            _warn_unresolved(settings, owner_name, field_name, declared.name)
            return PropertyResult()
        compiled.type_name = declared.name
        return PropertyResult(compiled)

    nested_properties = declared.properties
    if not nested_properties:
        # Nothing to materialize: expose the structure as opaque JSON.
        compiled.is_scalar = True
        compiled.scalar_kind = ScalarKind.JSON
        compiled.type_name = ScalarKind.JSON.value
        return PropertyResult(compiled)

    if depth >= settings.max_embed_depth:
        raise EmbedDepthError(
            f"Anonymous type '{derived_name}' exceeds the maximum embed depth of {settings.max_embed_depth}",
            model_name=model_name or owner_name,
            field_name=field_name,
            depth=depth + 1,
            max_depth=settings.max_embed_depth,
        )

    minted: List[TypeDescriptor] = []
    nested_fields = {}
    for nested_declaration in nested_properties.values():
        result = compile_property(
            derived_name,
            nested_declaration,
            settings=settings,
            known_models=known_models,
            hidden=declared.hidden,
            depth=depth + 1,
            model_name=model_name or owner_name,
        )
        minted.extend(result.types)
        if result.field is not None:
            nested_fields[result.field.name] = result.field

    minted.append(
        TypeDescriptor(
            name=derived_name,
            category=TypeCategory.OBJECT,
            description=declared.name,
            fields=nested_fields,
            input=True,
        )
    )
    compiled.type_name = derived_name
    compiled.nested_type_name = derived_name
    return PropertyResult(compiled, minted)
