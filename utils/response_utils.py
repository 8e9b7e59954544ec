"""Helpers for turning Shopify response bodies into tool output text.

`parse_body` decodes JSON bodies and hands anything else back unchanged, so
non-JSON content reaches the caller untruncated.
`format_json` renders the parsed body as the indented JSON text returned to MCP callers.
"""
from __future__ import annotations

import json
from typing import Any


def parse_body(text: str) -> Any:
    """Parse a response body. Empty bodies (e.g. DELETE responses) give None."""
    if not text or not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


def format_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def error_message(payload: Any) -> str | None:
    """Extract the `errors` member Shopify puts on failed responses.

    Returns None when the payload carries no usable error description.
    """
    if not isinstance(payload, dict):
        return None
    errors = payload.get("errors")
    if not errors:
        return None
    if isinstance(errors, str):
        return errors
    return json.dumps(errors, ensure_ascii=False)
