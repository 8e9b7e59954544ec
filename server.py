from core.logging_config import setup_logging
from core.config import ShopifyConfig, get_config, load_shopify_config
from core.dispatcher import Dispatcher, ErrorKind, ToolError
from core.registry import ToolRegistry, load_registry
from core.transport import ShopifyClient
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
import asyncio
import logging
import sys

logger = logging.getLogger(__name__)

SERVER_NAME = "shopify-mcp-server"
SERVER_VERSION = "1.0.0"

ERROR_CODES = {
    ErrorKind.METHOD_NOT_FOUND: types.METHOD_NOT_FOUND,
    ErrorKind.INTERNAL_ERROR: types.INTERNAL_ERROR,
}


def to_mcp_error(error: ToolError) -> McpError:
    message = error.message
    if error.kind is ErrorKind.INTERNAL_ERROR:
        message = f"Shopify API error: {message}"
    return McpError(types.ErrorData(code=ERROR_CODES[error.kind], message=message))


def create_server(
    client: ShopifyClient,
    registry: ToolRegistry | None = None,
    name: str = SERVER_NAME,
    version: str = SERVER_VERSION,
) -> Server:
    """Build the MCP server exposing every registered tool over `client`."""
    registry = registry or load_registry()
    dispatcher = Dispatcher(client, registry.handlers())
    server = Server(name, version=version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return registry.as_mcp_tools()

    # registered directly so McpError reaches the client as a JSON-RPC error
    # instead of being folded into an isError tool result
    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await dispatcher.dispatch(req.params.name, req.params.arguments or {})
        if isinstance(result, ToolError):
            raise to_mcp_error(result)
        return types.ServerResult(
            types.CallToolResult(content=[types.TextContent(type="text", text=result.text)])
        )

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def serve(config: ShopifyConfig, settings: dict) -> None:
    server_settings = settings.get("server") or {}
    async with ShopifyClient(config) as client:
        server = create_server(
            client,
            name=server_settings.get("name", SERVER_NAME),
            version=str(server_settings.get("version", SERVER_VERSION)),
        )
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Shopify MCP server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    settings = get_config() or {}
    log_settings = settings.get("logging") or {}
    setup_logging(log_settings.get("log_dir"), log_settings.get("log_file_name", "server.log"))

    logger.info("MCP server bootstrap starting.")
    config = load_shopify_config(settings)
    logger.info(f"Shop: {config.shop_domain or '<unset>'}, API version: {config.api_version}")
    try:
        asyncio.run(serve(config, settings))
        logger.info("MCP server shut down.")
    except Exception:
        logger.exception("Unhandled exception running MCP server")
        print("Unhandled exception occurred. See logs/server.log for details.", file=sys.stderr)
        sys.exit(-1)


if __name__ == "__main__":
    main()
