"""
JSON custom scalar.

Backs every opaque value declared as ``any``, ``object`` or an untyped array,
and the free-form filter argument of relation connections.
"""

import json
from typing import Any, Dict, Optional, Union

from graphene import Scalar
from graphql.error import GraphQLError
from graphql.language import ast


def _literal_to_python(node: ast.ValueNode, variables: Optional[Dict[str, Any]] = None) -> Any:
    """Convert a literal nested inside a JSON value; strings are kept verbatim."""
    if isinstance(node, ast.ObjectValueNode):
        return {field.name.value: _literal_to_python(field.value, variables) for field in node.fields}
    if isinstance(node, ast.ListValueNode):
        return [_literal_to_python(value, variables) for value in node.values]
    if isinstance(node, (ast.StringValueNode, ast.BooleanValueNode, ast.EnumValueNode)):
        return node.value
    if isinstance(node, ast.IntValueNode):
        return int(node.value)
    if isinstance(node, ast.FloatValueNode):
        return float(node.value)
    if isinstance(node, ast.NullValueNode):
        return None
    if isinstance(node, ast.VariableNode):
        return (variables or {}).get(node.name.value)

    raise GraphQLError(f"Cannot parse {type(node).__name__} as JSON")


class JSON(Scalar):
    """
    Opaque JSON value.

    Output values are serialized to a JSON string. Inputs are accepted either
    as a JSON-encoded string or as a GraphQL object/list literal.
    """

    @staticmethod
    def serialize(value: Any) -> str:
        try:
            return json.dumps(value, default=str)
        except (TypeError, ValueError) as e:
            raise GraphQLError(f"Cannot serialize value as JSON: {e}")

    @staticmethod
    def parse_literal(node: ast.ValueNode, _variables: Optional[Dict[str, Any]] = None) -> Any:
        # Only a top-level string is JSON-encoded text.
        if isinstance(node, ast.StringValueNode):
            return JSON.parse_value(node.value)
        return _literal_to_python(node, _variables)

    @staticmethod
    def parse_value(value: Union[str, dict, list]) -> Any:
        if isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError as e:
                raise GraphQLError(f"Invalid JSON format: {e}")

        return value
