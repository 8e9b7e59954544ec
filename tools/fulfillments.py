from typing import Any

from utils.request_builder import ShopifyRequest, resource_path, split_identifier


def create_fulfillment(args: dict[str, Any]) -> ShopifyRequest:
    order_id, fulfillment = split_identifier(args, "order_id")
    return ShopifyRequest(
        "POST",
        resource_path("orders", order_id, "fulfillments"),
        json={"fulfillment": fulfillment},
    )


def get_tools() -> dict[str, Any]:
    return {
        "create_fulfillment": {
            "func": create_fulfillment,
            "title": "Create fulfillment",
            "description": "Create a fulfillment for an order",
            "input_schema": {
                "type": "object",
                "required": ["order_id", "line_items"],
                "properties": {
                    "order_id": {"type": "string", "description": "Order ID"},
                    "location_id": {"type": "string", "description": "Location ID"},
                    "tracking_number": {"type": "string", "description": "Tracking number"},
                    "tracking_company": {"type": "string", "description": "Shipping company"},
                    "tracking_url": {"type": "string", "description": "Tracking URL"},
                    "notify_customer": {"type": "boolean", "description": "Send notification to customer"},
                    "line_items": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "id": {"type": "string", "description": "Line item ID"},
                                "quantity": {"type": "number", "description": "Quantity to fulfill"},
                            },
                        },
                    },
                },
            },
        },
    }
