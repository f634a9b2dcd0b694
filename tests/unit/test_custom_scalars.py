from datetime import date, datetime

import pytest
from graphql.error import GraphQLError
from graphql.language import parse_value

from typegraph.core.scalars import JSON, Date

pytestmark = pytest.mark.unit


def test_json_serializes_python_values():
    assert JSON.serialize({"a": [1, 2]}) == '{"a": [1, 2]}'


def test_json_parses_strings_and_passes_structures_through():
    assert JSON.parse_value('{"active": true}') == {"active": True}
    assert JSON.parse_value({"active": True}) == {"active": True}


def test_json_rejects_malformed_strings():
    with pytest.raises(GraphQLError):
        JSON.parse_value("{not json")


def test_json_parses_literals():
    node = parse_value('{status: "open", count: 3, ratio: 0.5, tags: ["a"], gone: null}')
    assert JSON.parse_literal(node) == {
        "status": "open",
        "count": 3,
        "ratio": 0.5,
        "tags": ["a"],
        "gone": None,
    }


def test_json_keeps_nested_string_literals_verbatim():
    node = parse_value('{status: "open", labels: ["not json", "{"], mode: ACTIVE}')
    assert JSON.parse_literal(node) == {
        "status": "open",
        "labels": ["not json", "{"],
        "mode": "ACTIVE",
    }


def test_json_decodes_top_level_string_literals():
    assert JSON.parse_literal(parse_value('"{\\"active\\": true}"')) == {"active": True}
    with pytest.raises(GraphQLError):
        JSON.parse_literal(parse_value('"open"'))


def test_json_literals_resolve_variables():
    node = parse_value("{status: $status}")
    assert JSON.parse_literal(node, {"status": "closed"}) == {"status": "closed"}


def test_date_serializes_dates_and_datetimes():
    assert Date.serialize(date(2024, 3, 1)) == "2024-03-01"
    assert Date.serialize(datetime(2024, 3, 1, 12, 30)) == "2024-03-01T12:30:00"


def test_date_rejects_non_dates():
    with pytest.raises(GraphQLError):
        Date.serialize("2024-03-01")


def test_date_parses_date_and_datetime_strings():
    assert Date.parse_value("2024-03-01") == date(2024, 3, 1)
    parsed = Date.parse_value("2024-03-01T12:30:00")
    assert isinstance(parsed, datetime)
    assert parsed.hour == 12


def test_date_rejects_invalid_strings():
    with pytest.raises(GraphQLError):
        Date.parse_value("not a date")
