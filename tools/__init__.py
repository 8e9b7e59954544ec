# tools package for MCP server tools
# Each module exposes `get_tools() -> dict[str, dict]` mapping a tool name to
# {"func": request builder, "title": str, "description": str, "input_schema": dict}.
# The registry imports them in the order listed here, which is the order tools are listed to clients.
TOOL_MODULES = [
    "products",
    "orders",
    "customers",
    "inventory",
    "analytics",
    "collection_tools",
    "discounts",
    "fulfillments",
    "webhooks",
    "shop",
]

__all__ = ["TOOL_MODULES"]
