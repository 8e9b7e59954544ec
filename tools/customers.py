from typing import Any

from utils.request_builder import ShopifyRequest, create_request, get_request, update_request

LIST_PARAMS = ["limit", "created_at_min", "created_at_max", "updated_at_min", "updated_at_max"]


def get_customers(args: dict[str, Any]) -> ShopifyRequest:
    return get_request("/customers.json", args, LIST_PARAMS)


def search_customers(args: dict[str, Any]) -> ShopifyRequest:
    """`query` is always sent, even when empty; `limit` only when given."""
    params: list[tuple[str, Any]] = [("query", args["query"])]
    if args.get("limit"):
        params.append(("limit", args["limit"]))
    return ShopifyRequest("GET", "/customers/search.json", params=params)


def create_customer(args: dict[str, Any]) -> ShopifyRequest:
    return create_request("/customers.json", "customer", args)


def update_customer(args: dict[str, Any]) -> ShopifyRequest:
    return update_request("customers", "customer", "customer_id", args)


def get_tools() -> dict[str, Any]:
    return {
        "get_customers": {
            "func": get_customers,
            "title": "List customers",
            "description": "Retrieve customers from Shopify store",
            "input_schema": {
                "type": "object",
                "properties": {
                    "limit": {"type": "number", "description": "Number of customers to retrieve (max 250)"},
                    "created_at_min": {"type": "string", "description": "ISO 8601 date"},
                    "created_at_max": {"type": "string", "description": "ISO 8601 date"},
                    "updated_at_min": {"type": "string", "description": "ISO 8601 date"},
                    "updated_at_max": {"type": "string", "description": "ISO 8601 date"},
                },
            },
        },
        "search_customers": {
            "func": search_customers,
            "title": "Search customers",
            "description": "Search customers by query",
            "input_schema": {
                "type": "object",
                "required": ["query"],
                "properties": {
                    "query": {"type": "string", "description": "Search query (email, name, etc.)"},
                    "limit": {"type": "number", "description": "Number of results to return"},
                },
            },
        },
        "create_customer": {
            "func": create_customer,
            "title": "Create customer",
            "description": "Create a new customer",
            "input_schema": {
                "type": "object",
                "required": ["email"],
                "properties": {
                    "email": {"type": "string", "description": "Customer email"},
                    "first_name": {"type": "string", "description": "First name"},
                    "last_name": {"type": "string", "description": "Last name"},
                    "phone": {"type": "string", "description": "Phone number"},
                    "tags": {"type": "string", "description": "Comma-separated tags"},
                    "accepts_marketing": {"type": "boolean", "description": "Accepts marketing emails"},
                    "password": {"type": "string", "description": "Customer password"},
                    "password_confirmation": {"type": "string", "description": "Password confirmation"},
                    "send_email_invite": {"type": "boolean", "description": "Send email invitation"},
                },
            },
        },
        "update_customer": {
            "func": update_customer,
            "title": "Update customer",
            "description": "Update customer information",
            "input_schema": {
                "type": "object",
                "required": ["customer_id"],
                "properties": {
                    "customer_id": {"type": "string", "description": "Customer ID"},
                    "email": {"type": "string", "description": "Customer email"},
                    "first_name": {"type": "string", "description": "First name"},
                    "last_name": {"type": "string", "description": "Last name"},
                    "phone": {"type": "string", "description": "Phone number"},
                    "tags": {"type": "string", "description": "Comma-separated tags"},
                    "accepts_marketing": {"type": "boolean", "description": "Accepts marketing emails"},
                },
            },
        },
    }
