from typing import Any

from utils.request_builder import ShopifyRequest, get_request, resource_path, split_identifier


def get_price_rules(args: dict[str, Any]) -> ShopifyRequest:
    return get_request("/price_rules.json", args, ["limit"])


def create_discount_code(args: dict[str, Any]) -> ShopifyRequest:
    price_rule_id, code = split_identifier(args, "price_rule_id")
    return ShopifyRequest(
        "POST",
        resource_path("price_rules", price_rule_id, "discount_codes"),
        json={"discount_code": code},
    )


def get_tools() -> dict[str, Any]:
    return {
        "get_price_rules": {
            "func": get_price_rules,
            "title": "List price rules",
            "description": "Get discount price rules",
            "input_schema": {
                "type": "object",
                "properties": {
                    "limit": {"type": "number", "description": "Number of price rules to retrieve"},
                },
            },
        },
        "create_discount_code": {
            "func": create_discount_code,
            "title": "Create discount code",
            "description": "Create a discount code",
            "input_schema": {
                "type": "object",
                "required": ["price_rule_id", "code"],
                "properties": {
                    "price_rule_id": {"type": "string", "description": "Price rule ID"},
                    "code": {"type": "string", "description": "Discount code"},
                    "usage_limit": {"type": "number", "description": "Usage limit for the code"},
                },
            },
        },
    }
