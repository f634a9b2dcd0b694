"""
Relation compilation.

Every exposed relation becomes a relay-style connection field. Resolution is
deferred: the compiled field only carries a resolver that, at query time,
asks the relation lookup collaborator for the related instances and slices
them into a connection.
"""

import asyncio
import concurrent.futures
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from graphql_relay import connection_args, connection_from_array

from ...core.registry import ArgumentDescriptor, FieldDescriptor
from ...core.scalars import ScalarKind
from ...core.settings import CompilerSettings
from ..exceptions import RelationLookupError
from ..introspector import RelationDeclaration

logger = logging.getLogger(__name__)

# (relation, source, args, context) -> awaitable | Future | sequence
RelationLookup = Callable[[RelationDeclaration, Any, Dict[str, Any], Any], Any]


def build_connection_arguments(filter_argument: Optional[str] = None) -> Dict[str, ArgumentDescriptor]:
    """Relay pagination arguments, preceded by the free-form filter argument if any."""
    arguments: Dict[str, ArgumentDescriptor] = {}
    if filter_argument:
        arguments[filter_argument] = ArgumentDescriptor(
            type_name=ScalarKind.JSON.value,
            description="Free-form filter forwarded to the relation lookup",
        )
    for name, argument in connection_args.items():
        arguments[name] = ArgumentDescriptor(
            type_name=str(argument.type),
            description=argument.description,
        )
    return arguments


def missing_relation_lookup(relation: RelationDeclaration, source: Any, args: Dict[str, Any], context: Any) -> Any:
    raise RelationLookupError(
        f"No relation lookup configured to resolve '{relation.name}'",
        model_name=relation.source,
        relation_name=relation.name,
    )


def make_connection_resolver(
    relation: RelationDeclaration, lookup: RelationLookup
) -> Callable[..., Awaitable[Any]]:
    """Build the deferred resolver of a relation field."""

    async def resolve(source: Any, args: Optional[Dict[str, Any]] = None, context: Any = None) -> Any:
        arguments = dict(args or {})
        related = lookup(relation, source, arguments, context)
        if isinstance(related, concurrent.futures.Future):
            related = await asyncio.wrap_future(related)
        elif inspect.isawaitable(related):
            related = await related
        return connection_from_array(list(related or ()), arguments)

    return resolve


def compile_relation(
    relation: RelationDeclaration,
    *,
    settings: CompilerSettings,
    lookup: RelationLookup = missing_relation_lookup,
) -> FieldDescriptor:
    """
    Compile a relation into a connection field typed by its target model.
    """
    logger.debug(
        f"Compiling relation {relation.source}.{relation.name} -> {relation.target} ({relation.kind.value})"
    )
    return FieldDescriptor(
        name=relation.name,
        type_name=relation.target,
        is_list=True,
        is_relation=True,
        is_connection=True,
        relation_kind=relation.kind.value,
        embed=relation.embed,
        args=build_connection_arguments(settings.relation_filter_argument),
        resolve=make_connection_resolver(relation, lookup),
    )
