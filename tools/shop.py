from typing import Any

from utils.request_builder import ShopifyRequest, get_request


def get_shop_info(args: dict[str, Any]) -> ShopifyRequest:
    return ShopifyRequest("GET", "/shop.json")


def get_locations(args: dict[str, Any]) -> ShopifyRequest:
    return get_request("/locations.json", args, ["limit"])


def get_tools() -> dict[str, Any]:
    return {
        "get_shop_info": {
            "func": get_shop_info,
            "title": "Get shop info",
            "description": "Get shop information and settings",
            "input_schema": {"type": "object", "properties": {}},
        },
        "get_locations": {
            "func": get_locations,
            "title": "List locations",
            "description": "Get store locations",
            "input_schema": {
                "type": "object",
                "properties": {
                    "limit": {"type": "number", "description": "Number of locations to retrieve"},
                },
            },
        },
    }
