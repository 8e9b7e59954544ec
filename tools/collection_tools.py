"""Smart and custom collections live under separate Shopify endpoints.

Retrieval picks the endpoint from `collection_type`. Creation treats any
`rules` argument as a smart collection, whatever `collection_type` says.
"""
from typing import Any

from utils.request_builder import ShopifyRequest, get_request

SMART = "smart"
CUSTOM = "custom"

SORT_ORDERS = [
    "alpha-asc",
    "alpha-desc",
    "best-selling",
    "created",
    "created-desc",
    "manual",
    "price-asc",
    "price-desc",
]


def collection_kind(args: dict[str, Any]) -> str:
    if args.get("rules") is not None:
        return SMART
    return SMART if args.get("collection_type") == SMART else CUSTOM


def get_collections(args: dict[str, Any]) -> ShopifyRequest:
    kind = SMART if args.get("collection_type") == SMART else CUSTOM
    return get_request(f"/{kind}_collections.json", args, ["limit"])


def create_collection(args: dict[str, Any]) -> ShopifyRequest:
    kind = collection_kind(args)
    return ShopifyRequest("POST", f"/{kind}_collections.json", json={f"{kind}_collection": dict(args)})


def get_tools() -> dict[str, Any]:
    return {
        "get_collections": {
            "func": get_collections,
            "title": "List collections",
            "description": "Get product collections",
            "input_schema": {
                "type": "object",
                "properties": {
                    "limit": {"type": "number", "description": "Number of collections to retrieve"},
                    "collection_type": {"type": "string", "enum": [SMART, CUSTOM], "description": "Collection type"},
                },
            },
        },
        "create_collection": {
            "func": create_collection,
            "title": "Create collection",
            "description": "Create a new collection. Supplying rules creates a smart collection.",
            "input_schema": {
                "type": "object",
                "required": ["title"],
                "properties": {
                    "title": {"type": "string", "description": "Collection title"},
                    "body_html": {"type": "string", "description": "Collection description"},
                    "sort_order": {"type": "string", "enum": SORT_ORDERS},
                    "published": {"type": "boolean", "description": "Whether collection is published"},
                    "collection_type": {
                        "type": "string",
                        "enum": [SMART, CUSTOM],
                        "description": "Collection type, used when no rules are given",
                    },
                    "rules": {
                        "type": "array",
                        "description": "Smart collection conditions",
                        "items": {
                            "type": "object",
                            "properties": {
                                "column": {"type": "string", "description": "Product field, e.g. tag or vendor"},
                                "relation": {"type": "string", "description": "e.g. equals, contains"},
                                "condition": {"type": "string", "description": "Value to match"},
                            },
                        },
                    },
                },
            },
        },
    }
