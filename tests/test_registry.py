"""Tests for core/registry.py: tool discovery, ordering and schemas."""
import pytest

from core.registry import ToolDescriptor, ToolRegistry, load_registry
from utils.request_builder import ShopifyRequest

EXPECTED_ORDER = [
    "get_products",
    "create_product",
    "update_product",
    "delete_product",
    "get_orders",
    "get_order",
    "update_order",
    "cancel_order",
    "get_customers",
    "search_customers",
    "create_customer",
    "update_customer",
    "get_inventory_levels",
    "adjust_inventory",
    "set_inventory",
    "get_analytics_reports",
    "get_collections",
    "create_collection",
    "get_price_rules",
    "create_discount_code",
    "create_fulfillment",
    "get_webhooks",
    "create_webhook",
    "get_shop_info",
    "get_locations",
]


@pytest.fixture(scope="module")
def registry():
    return load_registry()


def _noop(args):
    return ShopifyRequest("GET", "/shop.json")


class TestCatalog:
    def test_order_and_names(self, registry):
        assert registry.names() == EXPECTED_ORDER

    def test_every_descriptor_has_description(self, registry):
        for d in registry.descriptors:
            assert d.description, d.name
            assert callable(d.builder)

    def test_schemas_are_objects(self, registry):
        for d in registry.descriptors:
            assert d.input_schema["type"] == "object", d.name
            props = d.input_schema["properties"]
            for field in d.input_schema.get("required", []):
                assert field in props, f"{d.name}.{field}"

    def test_order_status_enum(self, registry):
        props = registry.get("get_orders").input_schema["properties"]
        assert props["status"]["enum"] == ["open", "closed", "cancelled", "any"]

    def test_schema_defaults(self, registry):
        product = registry.get("create_product").input_schema["properties"]
        assert product["status"]["default"] == "draft"
        webhook = registry.get("create_webhook").input_schema["properties"]
        assert webhook["format"]["default"] == "json"

    def test_required_fields(self, registry):
        assert registry.get("adjust_inventory").input_schema["required"] == [
            "location_id",
            "inventory_item_id",
            "available_adjustment",
        ]
        assert registry.get("create_fulfillment").input_schema["required"] == ["order_id", "line_items"]

    def test_mcp_tools(self, registry):
        tools = registry.as_mcp_tools()
        assert [t.name for t in tools] == EXPECTED_ORDER
        assert tools[0].inputSchema == registry.get("get_products").input_schema

    def test_lookup(self, registry):
        assert "get_shop_info" in registry
        assert "drop_database" not in registry
        assert registry.get("drop_database") is None
        assert set(registry.handlers()) == set(EXPECTED_ORDER)


class TestToolRegistry:
    def test_duplicate_names_rejected(self):
        d = ToolDescriptor("dup", None, "x", {"type": "object", "properties": {}}, _noop)
        with pytest.raises(ValueError, match="dup"):
            ToolRegistry([d, d])

    def test_subset_of_modules(self):
        reg = load_registry(["shop", "webhooks"])
        assert reg.names() == ["get_shop_info", "get_locations", "get_webhooks", "create_webhook"]
