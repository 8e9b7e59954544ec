"""HTTP access to the Shopify Admin REST API.

One `ShopifyClient` is created at startup and shared by every tool call.
It issues exactly one request per call: no retries, no explicit timeout.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import ShopifyConfig
from utils import ShopifyRequest, error_message, get_base_url, parse_body

logger = logging.getLogger(__name__)


class ShopifyAPIError(Exception):
    """A Shopify call failed at the network or HTTP level."""

    def __init__(self, message: str, status_code: int | None = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


class ShopifyClient:
    def __init__(self, config: ShopifyConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self._client = httpx.AsyncClient(
            base_url=get_base_url(config),
            headers={
                "X-Shopify-Access-Token": config.access_token,
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def send(self, request: ShopifyRequest) -> Any:
        """Issue `request` and return the parsed response body (None when empty)."""
        try:
            response = await self._client.request(
                request.method,
                request.path,
                params=request.params,
                json=request.json,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            payload = parse_body(e.response.text)
            message = error_message(payload) or str(e)
            raise ShopifyAPIError(message, status_code=e.response.status_code, payload=payload) from e
        except httpx.HTTPError as e:
            raise ShopifyAPIError(str(e)) from e

        if request.confirmation is not None:
            return None
        return parse_body(response.text)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ShopifyClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
