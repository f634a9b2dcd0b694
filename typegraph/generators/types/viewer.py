"""
Aggregate root ("Viewer") generation.
"""

from typing import Iterable

from ...core.registry import FieldDescriptor, TypeCategory, TypeDescriptor
from ...core.settings import CompilerSettings
from ..introspector import ModelDefinition
from .relations import build_connection_arguments


def lower_first(value: str) -> str:
    return value[:1].lower() + value[1:]


def generate_viewer(models: Iterable[ModelDefinition], settings: CompilerSettings) -> TypeDescriptor:
    """
    Build the umbrella type exposing one paginated listing per shared model.

    Only the ``shared`` flag and plural name of each model are read, so this
    can run before, after or between model compilations.
    """
    fields = {}
    for model in models:
        if not model.shared:
            continue
        name = lower_first(model.plural_model_name)
        fields[name] = FieldDescriptor(
            name=name,
            type_name=model.model_name,
            is_list=True,
            is_relation=True,
            is_connection=True,
            args=build_connection_arguments(),
        )

    return TypeDescriptor(
        name=settings.root_type_name,
        category=TypeCategory.OBJECT,
        description=settings.root_type_description,
        fields=fields,
    )
