from typing import Any

from utils.request_builder import ShopifyRequest, get_request

LIST_PARAMS = ["inventory_item_ids", "location_ids", "limit"]


def get_inventory_levels(args: dict[str, Any]) -> ShopifyRequest:
    return get_request("/inventory_levels.json", args, LIST_PARAMS)


def adjust_inventory(args: dict[str, Any]) -> ShopifyRequest:
    return ShopifyRequest("POST", "/inventory_levels/adjust.json", json=dict(args))


def set_inventory(args: dict[str, Any]) -> ShopifyRequest:
    return ShopifyRequest("POST", "/inventory_levels/set.json", json=dict(args))


LEVEL_TARGET = {
    "location_id": {"type": "string", "description": "Location ID"},
    "inventory_item_id": {"type": "string", "description": "Inventory item ID"},
}


def get_tools() -> dict[str, Any]:
    return {
        "get_inventory_levels": {
            "func": get_inventory_levels,
            "title": "Get inventory levels",
            "description": "Get inventory levels for products",
            "input_schema": {
                "type": "object",
                "properties": {
                    "inventory_item_ids": {"type": "string", "description": "Comma-separated inventory item IDs"},
                    "location_ids": {"type": "string", "description": "Comma-separated location IDs"},
                    "limit": {"type": "number", "description": "Number of results (max 250)"},
                },
            },
        },
        "adjust_inventory": {
            "func": adjust_inventory,
            "title": "Adjust inventory",
            "description": "Adjust inventory levels",
            "input_schema": {
                "type": "object",
                "required": ["location_id", "inventory_item_id", "available_adjustment"],
                "properties": {
                    **LEVEL_TARGET,
                    "available_adjustment": {
                        "type": "number",
                        "description": "Quantity adjustment (positive or negative)",
                    },
                },
            },
        },
        "set_inventory": {
            "func": set_inventory,
            "title": "Set inventory",
            "description": "Set inventory level to specific quantity",
            "input_schema": {
                "type": "object",
                "required": ["location_id", "inventory_item_id", "available"],
                "properties": {
                    **LEVEL_TARGET,
                    "available": {"type": "number", "description": "New inventory quantity"},
                },
            },
        },
    }
