"""
Date custom scalar.

Model properties typed ``date`` (and timestamps generated by ``now``) carry
full datetimes, so the scalar accepts both dates and datetimes on output and
returns whichever the input string describes.
"""

from datetime import date, datetime
from typing import Union

from django.utils.dateparse import parse_date, parse_datetime
from graphene import Scalar
from graphql.error import GraphQLError
from graphql.language import ast


class Date(Scalar):
    """
    Custom Date scalar.

    Serializes date and datetime objects to ISO 8601 strings.
    Parses ISO 8601 strings to datetime objects, or to date objects when no
    time component is present.
    """

    @staticmethod
    def serialize(value: Union[date, datetime]) -> str:
        """Serialize date or datetime to ISO string."""
        if not isinstance(value, date):
            raise GraphQLError(f"Value must be a date object, got {type(value).__name__}")

        return value.isoformat()

    @staticmethod
    def parse_literal(node: ast.Node, _variables=None) -> Union[date, datetime]:
        """Parse AST literal to date."""
        if isinstance(node, ast.StringValueNode):
            return Date.parse_value(node.value)

        raise GraphQLError(f"Cannot parse {type(node).__name__} as Date")

    @staticmethod
    def parse_value(value: str) -> Union[date, datetime]:
        """Parse string value to date or datetime."""
        if not isinstance(value, str):
            raise GraphQLError(f"Date must be a string, got {type(value).__name__}")

        try:
            parsed = parse_date(value)
            if parsed is None:
                parsed = parse_datetime(value)
            if parsed is None:
                parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))

            return parsed
        except (ValueError, TypeError) as e:
            raise GraphQLError(f"Invalid Date format: {e}")
