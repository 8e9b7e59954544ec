"""Building blocks shared by the per-tool request builders in `tools/`."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class ShopifyRequest:
    method: str
    path: str
    params: list[tuple[str, Any]] | None = None
    json: Any = None
    # fixed success text returned instead of the response body
    confirmation: str | None = None


def resource_path(*segments: Any) -> str:
    """`resource_path("orders", 5, "cancel")` -> `/orders/5/cancel.json`"""
    return "/" + "/".join(str(s) for s in segments) + ".json"


def collect_params(args: dict[str, Any], names: Iterable[str]) -> list[tuple[str, Any]]:
    """Query pairs for the truthy arguments in `names`, keeping the declared order."""
    return [(name, args[name]) for name in names if args.get(name)]


def split_identifier(args: dict[str, Any], key: str) -> tuple[Any, dict[str, Any]]:
    """Pull the identifying field out of `args`; the caller's dict is left untouched."""
    identifier = args[key]
    rest = {k: v for k, v in args.items() if k != key}
    return identifier, rest


def get_request(path: str, args: dict[str, Any], query: Iterable[str] = ()) -> ShopifyRequest:
    params = collect_params(args, query)
    return ShopifyRequest("GET", path, params=params or None)


def create_request(path: str, resource: str, args: dict[str, Any]) -> ShopifyRequest:
    return ShopifyRequest("POST", path, json={resource: dict(args)})


def update_request(collection: str, resource: str, id_field: str, args: dict[str, Any]) -> ShopifyRequest:
    identifier, body = split_identifier(args, id_field)
    return ShopifyRequest("PUT", resource_path(collection, identifier), json={resource: body})


def delete_request(collection: str, label: str, id_field: str, args: dict[str, Any]) -> ShopifyRequest:
    identifier = args[id_field]
    return ShopifyRequest(
        "DELETE",
        resource_path(collection, identifier),
        confirmation=f"{label} {identifier} deleted successfully",
    )
