import json

import pytest

from typegraph.core.registry import (
    DuplicateTypeError,
    FieldDescriptor,
    RegistryFrozenError,
    TypeCategory,
    TypeDescriptor,
    TypeRegistry,
)
from typegraph.core.scalars import ScalarKind

pytestmark = pytest.mark.unit


def make_object(name="Order", **fields):
    return TypeDescriptor(name=name, category=TypeCategory.OBJECT, fields=dict(fields), input=True)


def test_register_and_lookup():
    registry = TypeRegistry()
    order = registry.register(make_object())
    assert registry["Order"] is order
    assert registry.get("Missing") is None
    assert "Order" in registry
    assert len(registry) == 1
    assert list(registry) == ["Order"] == registry.names()


def test_identical_registration_is_deduplicated():
    registry = TypeRegistry()
    first = registry.register(make_object())
    second = registry.register(make_object())
    assert second is first
    assert len(registry) == 1


def test_resolvers_do_not_affect_identity():
    registry = TypeRegistry()
    registry.register(make_object(total=FieldDescriptor(name="total", resolve=lambda *a: 1)))
    registry.register(make_object(total=FieldDescriptor(name="total", resolve=lambda *a: 2)))
    assert len(registry) == 1


def test_conflicting_registration_raises():
    registry = TypeRegistry()
    registry.register(make_object())
    with pytest.raises(DuplicateTypeError) as excinfo:
        registry.register(TypeDescriptor(name="Order", category=TypeCategory.ENUM, values=("a",)))
    assert excinfo.value.type_name == "Order"


def test_merge_registers_in_order():
    registry = TypeRegistry()
    registry.merge([make_object("A"), make_object("B")])
    assert registry.names() == ["A", "B"]


def test_frozen_registry_rejects_new_types():
    registry = TypeRegistry()
    registry.register(make_object())
    fingerprint = registry.freeze()
    assert registry.frozen
    assert fingerprint.startswith("sha256:")
    assert registry.fingerprint == fingerprint
    with pytest.raises(RegistryFrozenError):
        registry.register(make_object("Other"))
    with pytest.raises(RegistryFrozenError):
        registry.freeze()


def test_generated_flag_can_flip_after_freeze():
    registry = TypeRegistry()
    registry.register(make_object())
    fingerprint = registry.freeze()
    registry.mark_generated("Order")
    assert registry["Order"].generated is True
    assert registry.fingerprint == fingerprint
    with pytest.raises(KeyError):
        registry.mark_generated("Missing")


def test_export_is_json_ready():
    registry = TypeRegistry()
    registry.register(
        make_object(total=FieldDescriptor(name="total", type_name="Float", is_scalar=True, scalar_kind=ScalarKind.FLOAT))
    )
    registry.register(
        TypeDescriptor(name="Order_status", category=TypeCategory.ENUM, values=("open",), scalar_kind=ScalarKind.STRING)
    )
    registry.register(TypeDescriptor(name="Order_payer", category=TypeCategory.UNION, members=("A", "B")))

    exported = json.loads(json.dumps(registry.as_dict()))
    assert exported["Order"]["fields"]["total"]["scalar_kind"] == "Float"
    assert exported["Order"]["input"] is True
    assert exported["Order_status"]["values"] == ["open"]
    assert exported["Order_payer"]["members"] == ["A", "B"]
    assert "resolve" not in exported["Order"]["fields"]["total"]
