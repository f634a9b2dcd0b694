from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

import pytest

from typegraph.generators.introspector import (
    AnonymousEmbedded,
    ListOf,
    ModelDefinition,
    ModelIntrospector,
    ModelReference,
    RelationKind,
    ScalarType,
    UnsupportedType,
    UntypedArray,
    load_models,
    parse_property,
    parse_type,
)

pytestmark = pytest.mark.unit


def test_declared_types_are_tagged_once():
    assert parse_type("string") == ScalarType("string")
    assert parse_type(" Date ") == ScalarType("Date")
    assert parse_type("array") == UntypedArray()
    assert parse_type([]) == UntypedArray()
    assert parse_type(list) == UntypedArray()
    assert parse_type(["number"]) == ListOf(ScalarType("number"))
    assert parse_type("Customer") == ModelReference("Customer")
    assert isinstance(parse_type({"street": "string"}), AnonymousEmbedded)


def test_python_types_map_to_declared_primitives():
    assert parse_type(str) == ScalarType("string")
    assert parse_type(int) == ScalarType("number")
    assert parse_type(bool) == ScalarType("boolean")
    assert parse_type(dict) == ScalarType("object")
    assert parse_type(datetime) == ScalarType("date")


def test_model_definitions_are_model_references():
    order = ModelDefinition(model_name="Order", plural_model_name="orders")
    assert parse_type(order) == ModelReference("Order")


def test_union_members_are_split_and_trimmed():
    reference = parse_type("Cat | Dog")
    assert reference.is_union
    assert reference.union_members == ("Cat", "Dog")
    assert not ModelReference("Cat").is_union


def test_dangling_pipes_collapse_to_a_single_type():
    assert parse_type("Order|") == ModelReference("Order")
    assert parse_type(" | Order") == ModelReference("Order")
    assert parse_type("string |") == ScalarType("string")


def test_unsupported_declarations_are_tagged_not_rejected():
    assert parse_type(bytes) == UnsupportedType("bytes")
    assert parse_type(Decimal) == UnsupportedType("Decimal")
    assert parse_type(None) == UnsupportedType("None")
    assert parse_property("data", {"type": bytes}).type == UnsupportedType("bytes")


def test_property_declarations_accept_mappings_objects_and_bare_types():
    mapped = parse_property("status", {"type": "string", "enum": ["a", "b"], "required": True})
    assert mapped.required is True
    assert mapped.enum == ("a", "b")

    attr = parse_property("createdAt", SimpleNamespace(type="date", defaultFn="now"))
    assert attr.type == ScalarType("date")
    assert attr.default_fn == "now"

    bare = parse_property("title", "string")
    assert bare.type == ScalarType("string")
    assert bare.required is False


def test_anonymous_structures_parse_nested_properties_on_demand():
    declaration = parse_property("address", {"type": {"street": "string", "zip": {"type": "number"}}})
    nested = declaration.type.properties
    assert list(nested) == ["street", "zip"]
    assert nested["zip"].type == ScalarType("number")


def test_introspector_reads_flat_mapping_descriptions(shop_models):
    customer = ModelIntrospector(shop_models[0]).get_definition()
    assert customer.model_name == "Customer"
    assert customer.plural_model_name == "Customers"
    assert customer.shared is True
    assert customer.hidden == frozenset({"password"})
    assert list(customer.properties)[:3] == ["id", "email", "password"]
    assert customer.relations["orders"].kind is RelationKind.HAS_MANY
    assert customer.relations["orders"].target == "Order"
    assert customer.relations["orders"].source == "Customer"


def test_introspector_reads_nested_definition_objects():
    raw = SimpleNamespace(
        modelName="Invoice",
        pluralModelName="Invoices",
        shared=True,
        definition=SimpleNamespace(
            properties={"amount": {"type": "number"}},
            settings={"hidden": ["amount"]},
        ),
        relations={
            "order": SimpleNamespace(type="belongsTo", embed=False, modelTo=SimpleNamespace(modelName="Order")),
        },
    )
    invoice = ModelIntrospector(raw).get_definition()
    assert invoice.model_name == "Invoice"
    assert invoice.hidden == frozenset({"amount"})
    assert invoice.relations["order"].target == "Order"
    assert invoice.relations["order"].kind is RelationKind.BELONGS_TO


def test_plural_name_defaults_to_suffix():
    model = ModelIntrospector({"name": "Ticket"}).get_definition()
    assert model.plural_model_name == "Tickets"
    assert model.shared is False


def test_unknown_relation_kinds_are_skipped(caplog):
    model = ModelIntrospector(
        {"name": "Ticket", "relations": {"owner": {"type": "ownedBy", "model": "User"}}}
    ).get_definition()
    assert model.relations == {}
    assert "ownedBy" in caplog.text


def test_relation_kinds_know_embedding_and_cardinality():
    assert RelationKind.from_str("EMBEDSMANY") is RelationKind.EMBEDS_MANY
    assert RelationKind.EMBEDS_ONE.is_embedded
    assert not RelationKind.HAS_MANY.is_embedded
    assert RelationKind.HAS_MANY.is_many
    assert not RelationKind.BELONGS_TO.is_many


def test_model_without_name_is_rejected():
    with pytest.raises(ValueError):
        ModelIntrospector({"properties": {}}).get_definition()


def test_load_models_keeps_order_and_passes_definitions_through(shop_models):
    ready = ModelDefinition(model_name="Ready", plural_model_name="Readies")
    models = load_models(shop_models + [ready])
    assert [m.model_name for m in models] == ["Customer", "Order", "Company", "InternalLog", "Ready"]
    assert models[-1] is ready
