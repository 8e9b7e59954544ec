from typing import Any

from utils.request_builder import ShopifyRequest, create_request, get_request


def get_webhooks(args: dict[str, Any]) -> ShopifyRequest:
    return get_request("/webhooks.json", args, ["limit"])


def create_webhook(args: dict[str, Any]) -> ShopifyRequest:
    return create_request("/webhooks.json", "webhook", args)


def get_tools() -> dict[str, Any]:
    return {
        "get_webhooks": {
            "func": get_webhooks,
            "title": "List webhooks",
            "description": "Get configured webhooks",
            "input_schema": {
                "type": "object",
                "properties": {
                    "limit": {"type": "number", "description": "Number of webhooks to retrieve"},
                },
            },
        },
        "create_webhook": {
            "func": create_webhook,
            "title": "Create webhook",
            "description": "Create a new webhook",
            "input_schema": {
                "type": "object",
                "required": ["topic", "address"],
                "properties": {
                    "topic": {
                        "type": "string",
                        "description": "Webhook topic (e.g., orders/create, products/update)",
                    },
                    "address": {"type": "string", "description": "Webhook URL endpoint"},
                    "format": {"type": "string", "enum": ["json", "xml"], "default": "json"},
                },
            },
        },
    }
