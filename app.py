import sys
from datetime import datetime, timezone
from typing import Any, Dict, List

import anyio
import anyio.to_thread
import mcp.types as types
import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from mcp.server.lowlevel import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server

from mcp_tools import Dispatcher
from netsapiens import ConfigError, NetSapiensAPI, ServerConfig, load_config
from netsapiens.log import get_logger, setup_logging

logger = get_logger("oitvoip")


def utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


# -----------------------------
# MCP server
# -----------------------------
def build_server(config: ServerConfig, dispatcher: Dispatcher) -> Server:
    server = Server(config.name, version=config.version)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [types.Tool(**tool) for tool in dispatcher.list_tools()]

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        reply = await anyio.to_thread.run_sync(
            dispatcher.call_tool, req.params.name, req.params.arguments or {}
        )
        content = [types.TextContent(type="text", text=block["text"]) for block in reply["content"]]
        return types.ServerResult(types.CallToolResult(content=content))

    # Raw request handler so McpError reaches the client as a JSON-RPC error
    # instead of an isError tool result.
    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def serve_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("OITVOIP MCP Server started successfully", extra={"transport": "stdio"})
        await server.run(read_stream, write_stream, server.create_initialization_options())


# -----------------------------
# FastAPI (health + MCP over SSE)
# -----------------------------
def create_http_app(config: ServerConfig, server: Server) -> FastAPI:
    app = FastAPI(title=config.name, version=config.version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    sse = SseServerTransport("/messages/")

    @app.get("/")
    def root() -> Dict[str, Any]:
        return {
            "ok": True,
            "message": "OITVOIP MCP Server alive",
            "service": config.name,
            "version": config.version,
            "ts": utc_iso(),
            "mcp_sse": "/sse",
        }

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"ok": True, "ts": utc_iso(), "service": config.name, "version": config.version}

    async def handle_sse(request: Request) -> Response:
        async with sse.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
        return Response()

    app.add_route("/sse", handle_sse, methods=["GET"])
    app.mount("/messages/", app=sse.handle_post_message)
    return app


# -----------------------------
# Process bootstrap
# -----------------------------
def main() -> None:
    try:
        config = load_config()
    except ConfigError as e:
        setup_logging("INFO")
        logger.error("Failed to start server", extra={"error": str(e)})
        sys.exit(1)

    setup_logging(config.log_level)
    if config.debug:
        logger.info(f"NetSapiens API URL: {config.netsapiens.api_url}")

    api = NetSapiensAPI(config.netsapiens)
    server = build_server(config, Dispatcher(api))

    try:
        if config.transport == "sse":
            logger.info(
                "OITVOIP MCP Server started successfully",
                extra={"transport": "sse", "host": config.host, "port": config.port},
            )
            uvicorn.run(create_http_app(config, server), host=config.host, port=config.port)
        else:
            anyio.run(serve_stdio, server)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception:
        logger.exception("Server stopped with an unrecoverable error")
        sys.exit(1)
    finally:
        api.close()


if __name__ == "__main__":
    main()
