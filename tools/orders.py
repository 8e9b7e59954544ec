from typing import Any

from utils.request_builder import (
    ShopifyRequest,
    get_request,
    resource_path,
    split_identifier,
    update_request,
)

ORDER_STATUSES = ["open", "closed", "cancelled", "any"]
FINANCIAL_STATUSES = [
    "authorized",
    "pending",
    "paid",
    "partially_paid",
    "refunded",
    "voided",
    "partially_refunded",
    "any",
]
FULFILLMENT_STATUSES = ["shipped", "partial", "unshipped", "any"]
CANCEL_REASONS = ["customer", "inventory", "fraud", "declined", "other"]

LIST_PARAMS = [
    "limit",
    "status",
    "financial_status",
    "fulfillment_status",
    "created_at_min",
    "created_at_max",
    "updated_at_min",
    "updated_at_max",
]


def get_orders(args: dict[str, Any]) -> ShopifyRequest:
    return get_request("/orders.json", args, LIST_PARAMS)


def get_order(args: dict[str, Any]) -> ShopifyRequest:
    return ShopifyRequest("GET", resource_path("orders", args["order_id"]))


def update_order(args: dict[str, Any]) -> ShopifyRequest:
    return update_request("orders", "order", "order_id", args)


def cancel_order(args: dict[str, Any]) -> ShopifyRequest:
    # the cancel endpoint takes its options at the top level, not under "order"
    order_id, options = split_identifier(args, "order_id")
    return ShopifyRequest("POST", resource_path("orders", order_id, "cancel"), json=options)


def get_tools() -> dict[str, Any]:
    return {
        "get_orders": {
            "func": get_orders,
            "title": "List orders",
            "description": "Retrieve orders from Shopify store",
            "input_schema": {
                "type": "object",
                "properties": {
                    "limit": {"type": "number", "description": "Number of orders to retrieve (max 250)"},
                    "status": {"type": "string", "enum": ORDER_STATUSES},
                    "financial_status": {"type": "string", "enum": FINANCIAL_STATUSES},
                    "fulfillment_status": {"type": "string", "enum": FULFILLMENT_STATUSES},
                    "created_at_min": {"type": "string", "description": "ISO 8601 date"},
                    "created_at_max": {"type": "string", "description": "ISO 8601 date"},
                    "updated_at_min": {"type": "string", "description": "ISO 8601 date"},
                    "updated_at_max": {"type": "string", "description": "ISO 8601 date"},
                },
            },
        },
        "get_order": {
            "func": get_order,
            "title": "Get order",
            "description": "Get a specific order by ID",
            "input_schema": {
                "type": "object",
                "required": ["order_id"],
                "properties": {
                    "order_id": {"type": "string", "description": "Order ID"},
                },
            },
        },
        "update_order": {
            "func": update_order,
            "title": "Update order",
            "description": "Update order properties",
            "input_schema": {
                "type": "object",
                "required": ["order_id"],
                "properties": {
                    "order_id": {"type": "string", "description": "Order ID to update"},
                    "note": {"type": "string", "description": "Order note"},
                    "tags": {"type": "string", "description": "Comma-separated tags"},
                    "email": {"type": "string", "description": "Customer email"},
                },
            },
        },
        "cancel_order": {
            "func": cancel_order,
            "title": "Cancel order",
            "description": "Cancel an order",
            "input_schema": {
                "type": "object",
                "required": ["order_id"],
                "properties": {
                    "order_id": {"type": "string", "description": "Order ID to cancel"},
                    "amount": {"type": "string", "description": "Refund amount"},
                    "restock": {"type": "boolean", "description": "Whether to restock items"},
                    "reason": {"type": "string", "enum": CANCEL_REASONS},
                    "email": {"type": "boolean", "description": "Whether to send cancellation email"},
                },
            },
        },
    }
