import json
from typing import Any

import httpx
import pytest
import pytest_asyncio

from core.config import ShopifyConfig
from core.transport import ShopifyClient

SHOP = "test-shop.myshopify.com"
TOKEN = "shpat_test_token"


class RecordingShopify:
    """httpx.MockTransport handler that records requests and replays a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {"ok": True}
        self.raw: str | None = None
        self.error: Exception | None = None

    def respond(self, status_code: int = 200, body: Any = None, raw: str | None = None):
        self.status_code = status_code
        self.body = body
        self.raw = raw

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status_code, text=self.raw)
        if self.body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def shopify_config():
    return ShopifyConfig(shop_domain=SHOP, access_token=TOKEN, api_version="2024-01")


@pytest.fixture
def shopify():
    return RecordingShopify()


@pytest_asyncio.fixture
async def client(shopify_config, shopify):
    c = ShopifyClient(shopify_config, transport=httpx.MockTransport(shopify))
    yield c
    await c.aclose()
