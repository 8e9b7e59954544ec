"""Tool registry: collects tool descriptors from the modules in the `tools` package.

Each tools module exposes `get_tools()` returning a mapping of
tool_name -> {"func": builder, "title": str, "description": str, "input_schema": dict}.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import import_module
from typing import Any, Callable, Iterable, Mapping

from mcp import types

from tools import TOOL_MODULES
from utils import ShopifyRequest

logger = logging.getLogger(__name__)

Builder = Callable[[dict[str, Any]], ShopifyRequest]


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    title: str | None
    description: str
    input_schema: dict[str, Any]
    builder: Builder

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=self.input_schema,
        )


class ToolRegistry:
    def __init__(self, descriptors: Iterable[ToolDescriptor]):
        self._by_name: dict[str, ToolDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in self._by_name:
                raise ValueError(f"Duplicate tool name: {descriptor.name}")
            self._by_name[descriptor.name] = descriptor
        self._descriptors = tuple(self._by_name.values())

    @property
    def descriptors(self) -> tuple[ToolDescriptor, ...]:
        return self._descriptors

    def names(self) -> list[str]:
        return [d.name for d in self._descriptors]

    def get(self, name: str) -> ToolDescriptor | None:
        return self._by_name.get(name)

    def handlers(self) -> Mapping[str, Builder]:
        return {d.name: d.builder for d in self._descriptors}

    def as_mcp_tools(self) -> list[types.Tool]:
        return [d.to_mcp_tool() for d in self._descriptors]

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


def descriptors_from_module(module_name: str) -> list[ToolDescriptor]:
    mod = import_module(module_name)
    if not hasattr(mod, "get_tools"):
        logger.warning(f"Tools module {module_name} has no get_tools(); skipping")
        return []

    found = []
    for tool_name, meta in mod.get_tools().items():
        func = meta.get("func")
        if not callable(func):
            logger.warning(f"Tool {tool_name} in {module_name} did not provide a callable; skipping")
            continue
        found.append(
            ToolDescriptor(
                name=tool_name,
                title=meta.get("title"),
                description=meta.get("description", ""),
                input_schema=meta.get("input_schema") or {"type": "object", "properties": {}},
                builder=func,
            )
        )
    return found


def load_registry(module_names: Iterable[str] = TOOL_MODULES, package: str = "tools") -> ToolRegistry:
    """Import the tools modules in order and build the registry."""
    descriptors: list[ToolDescriptor] = []
    for name in module_names:
        module_name = f"{package}.{name}"
        loaded = descriptors_from_module(module_name)
        logger.info(f"Imported tools module: {module_name} ({len(loaded)} tools)")
        descriptors.extend(loaded)
    registry = ToolRegistry(descriptors)
    logger.info(f"Total tools registered: {len(registry)} , tool names: {registry.names()}")
    return registry
