"""Routes a tool call to its request builder and wraps the outcome.

`Dispatcher.dispatch` never raises for the two expected failure modes
(unknown tool, Shopify/HTTP failure); it returns a `ToolError` instead.
Anything else a builder raises propagates to the caller unchanged.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

from core.transport import ShopifyAPIError, ShopifyClient
from utils import ShopifyRequest, format_json

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    METHOD_NOT_FOUND = "MethodNotFound"
    INTERNAL_ERROR = "InternalError"


@dataclass(frozen=True)
class ToolSuccess:
    text: str


@dataclass(frozen=True)
class ToolError:
    kind: ErrorKind
    message: str


ToolResult = Union[ToolSuccess, ToolError]


class Dispatcher:
    def __init__(self, client: ShopifyClient, handlers: Mapping[str, Callable[[dict[str, Any]], ShopifyRequest]]):
        self._client = client
        self._handlers = dict(handlers)

    async def dispatch(self, name: str, args: dict[str, Any] | None = None) -> ToolResult:
        builder = self._handlers.get(name)
        if builder is None:
            logger.warning(f"Unknown tool requested: {name}")
            return ToolError(ErrorKind.METHOD_NOT_FOUND, f"Unknown tool: {name}")

        request = builder(dict(args or {}))
        logger.info(f"Tool {name} -> {request.method} {request.path}")
        try:
            body = await self._client.send(request)
        except ShopifyAPIError as e:
            logger.warning(f"Tool {name} failed (status={e.status_code}): {e.message}")
            return ToolError(ErrorKind.INTERNAL_ERROR, e.message)

        if request.confirmation is not None:
            return ToolSuccess(request.confirmation)
        if isinstance(body, str):
            # not JSON; relay the body text unchanged
            return ToolSuccess(body)
        return ToolSuccess(format_json(body))
