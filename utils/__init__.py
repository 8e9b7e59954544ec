from utils.get_endpoint import get_base_url
from utils.request_builder import ShopifyRequest
from utils.response_utils import error_message, format_json, parse_body

__all__ = [
    "ShopifyRequest",
    "error_message",
    "format_json",
    "get_base_url",
    "parse_body",
]
