from typing import Any

from utils.request_builder import (
    ShopifyRequest,
    create_request,
    delete_request,
    get_request,
    update_request,
)

PRODUCT_STATUSES = ["active", "archived", "draft"]

LIST_PARAMS = ["limit", "page_info", "status", "vendor", "product_type", "collection_id"]


def get_products(args: dict[str, Any]) -> ShopifyRequest:
    """List products. Pagination is driven by the `page_info` cursor from a previous response."""
    return get_request("/products.json", args, LIST_PARAMS)


def create_product(args: dict[str, Any]) -> ShopifyRequest:
    return create_request("/products.json", "product", args)


def update_product(args: dict[str, Any]) -> ShopifyRequest:
    return update_request("products", "product", "product_id", args)


def delete_product(args: dict[str, Any]) -> ShopifyRequest:
    return delete_request("products", "Product", "product_id", args)


VARIANT_SCHEMA = {
    "type": "object",
    "properties": {
        "price": {"type": "string", "description": "Variant price"},
        "compare_at_price": {"type": "string", "description": "Compare at price"},
        "sku": {"type": "string", "description": "SKU"},
        "inventory_quantity": {"type": "number", "description": "Inventory quantity"},
        "weight": {"type": "number", "description": "Weight in grams"},
        "option1": {"type": "string", "description": "First option value"},
        "option2": {"type": "string", "description": "Second option value"},
        "option3": {"type": "string", "description": "Third option value"},
    },
}

IMAGE_SCHEMA = {
    "type": "object",
    "properties": {
        "src": {"type": "string", "description": "Image URL"},
        "alt": {"type": "string", "description": "Alt text"},
    },
}


def get_tools() -> dict[str, Any]:
    return {
        "get_products": {
            "func": get_products,
            "title": "List products",
            "description": "Retrieve products from Shopify store with filtering options",
            "input_schema": {
                "type": "object",
                "properties": {
                    "limit": {"type": "number", "description": "Number of products to retrieve (max 250)"},
                    "page_info": {"type": "string", "description": "Page info for pagination"},
                    "status": {"type": "string", "enum": PRODUCT_STATUSES},
                    "vendor": {"type": "string", "description": "Filter by vendor"},
                    "product_type": {"type": "string", "description": "Filter by product type"},
                    "collection_id": {"type": "string", "description": "Filter by collection ID"},
                },
            },
        },
        "create_product": {
            "func": create_product,
            "title": "Create product",
            "description": "Create a new product in Shopify",
            "input_schema": {
                "type": "object",
                "required": ["title"],
                "properties": {
                    "title": {"type": "string", "description": "Product title"},
                    "body_html": {"type": "string", "description": "Product description (HTML)"},
                    "vendor": {"type": "string", "description": "Product vendor"},
                    "product_type": {"type": "string", "description": "Product type"},
                    "status": {"type": "string", "enum": PRODUCT_STATUSES, "default": "draft"},
                    "tags": {"type": "string", "description": "Comma-separated tags"},
                    "variants": {"type": "array", "items": VARIANT_SCHEMA},
                    "images": {"type": "array", "items": IMAGE_SCHEMA},
                },
            },
        },
        "update_product": {
            "func": update_product,
            "title": "Update product",
            "description": "Update an existing product",
            "input_schema": {
                "type": "object",
                "required": ["product_id"],
                "properties": {
                    "product_id": {"type": "string", "description": "Product ID to update"},
                    "title": {"type": "string", "description": "Product title"},
                    "body_html": {"type": "string", "description": "Product description (HTML)"},
                    "vendor": {"type": "string", "description": "Product vendor"},
                    "product_type": {"type": "string", "description": "Product type"},
                    "status": {"type": "string", "enum": PRODUCT_STATUSES},
                    "tags": {"type": "string", "description": "Comma-separated tags"},
                },
            },
        },
        "delete_product": {
            "func": delete_product,
            "title": "Delete product",
            "description": "Delete a product from Shopify",
            "input_schema": {
                "type": "object",
                "required": ["product_id"],
                "properties": {
                    "product_id": {"type": "string", "description": "Product ID to delete"},
                },
            },
        },
    }
