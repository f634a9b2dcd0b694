import django
import pytest
from django.conf import settings


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=[],
            USE_TZ=True,
            TYPEGRAPH={"compiler_settings": {}},
        )
        django.setup()


@pytest.fixture
def shop_models():
    """A small catalogue of model descriptions exercising every declared shape."""
    return [
        {
            "name": "Customer",
            "plural": "Customers",
            "shared": True,
            "properties": {
                "id": {"type": "string", "defaultFn": "uuidv4"},
                "email": {"type": "string", "required": True},
                "password": {"type": "string"},
                "tier": {"type": "string", "enum": ["gold", "silver", "bronze"]},
                "legacyCode": {"type": "string", "deprecated": True},
                "tags": {"type": ["string"]},
                "preferences": {"type": "object"},
                "address": {
                    "type": {
                        "street": "string",
                        "city": {"type": "string", "required": True},
                        "geo": {"type": {"lat": "number", "lng": "number"}},
                    }
                },
            },
            "hidden": ["password"],
            "relations": {
                "orders": {"type": "hasMany", "model": "Order"},
                "auditTrail": {"type": "hasMany", "model": "InternalLog"},
            },
        },
        {
            "name": "Order",
            "plural": "orders",
            "shared": True,
            "properties": {
                "total": {"type": "number", "required": True},
                "placedAt": {"type": "date", "defaultFn": "now"},
                "lines": {"type": "array"},
                "payer": {"type": "Customer|Company"},
            },
            "relations": {
                "customer": {"type": "belongsTo", "model": "Customer"},
            },
        },
        {
            "name": "Company",
            "shared": False,
            "properties": {"name": "string"},
        },
        {
            "name": "InternalLog",
            "plural": "InternalLogs",
            "shared": False,
            "properties": {"message": "string"},
        },
    ]
