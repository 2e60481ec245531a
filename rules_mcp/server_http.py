#!/usr/bin/env python3
"""
Rules MCP Server - HTTP Transport
Runs as a web server using MCP Streamable HTTP protocol.

For local clients, the stdio mode (`rules-mcp-server --stdio`) is the default.
"""

import contextlib
import os
from pathlib import Path

from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Mount, Route

from rules_mcp import __version__
from rules_mcp.errors import UnknownValue
from rules_mcp.server import RulesMCPServer

# Configuration
HOST = os.getenv("MCP_HOST", "127.0.0.1")


def create_app(rules_server: RulesMCPServer) -> Starlette:
    """
    Create the Starlette app.

    Endpoints:
    - /mcp            MCP protocol (Streamable HTTP)
    - /health         Deployment health check
    - /rules/{system} Formatted rules as markdown (category, language, codeType query params)
    """
    session_manager = StreamableHTTPSessionManager(app=rules_server.server)

    async def mcp_endpoint(scope, receive, send):
        await session_manager.handle_request(scope, receive, send)

    async def health_check(request: Request):
        """Health check endpoint."""
        catalog = rules_server.catalog
        return PlainTextResponse(
            f"Rules MCP Server (HTTP)\n"
            f"Version: {__version__}\n"
            f"Status: Running\n"
            f"Content: {catalog.content_path}\n"
            f"Tools: {len(rules_server.tool_registry)}\n"
            f"Resources: {len(catalog.get_all_resources())}\n"
            f"Prompts: {len(catalog.get_all_prompts())}\n"
            f"MCP endpoint: /mcp\n"
        )

    async def get_rules(request: Request):
        """Serve formatted rules for a system."""
        system = request.path_params.get("system", "")
        params = request.query_params
        try:
            collection = rules_server.catalog.get_all_rules(
                system,
                category=params.get("category"),
                language=params.get("language"),
                codeType=params.get("codeType"),
            )
        except UnknownValue as e:
            return PlainTextResponse(f"Error: {e}", status_code=404 if e.field == "system" else 400)

        return PlainTextResponse(
            rules_server.catalog.format_rules_as_text(collection),
            media_type="text/markdown; charset=utf-8",
        )

    @contextlib.asynccontextmanager
    async def lifespan(app):
        await rules_server.initialize()
        async with session_manager.run():
            yield

    return Starlette(
        routes=[
            Route("/health", endpoint=health_check),
            Route("/rules/{system}", endpoint=get_rules),
            Mount("/mcp", app=mcp_endpoint),
        ],
        lifespan=lifespan,
    )


async def main(port: int | None = None, content_path: str | Path | None = None):
    """Run the HTTP server."""
    import uvicorn

    port = port or int(os.getenv("MCP_PORT", "8000"))
    app = create_app(RulesMCPServer(content_path=content_path))
    config = uvicorn.Config(
        app,
        host=HOST,
        port=port,
        log_level="info",
    )
    server = uvicorn.Server(config)

    print(f"Rules MCP Server (HTTP) starting on http://{HOST}:{port}")
    print(f"")
    print(f"Endpoints:")
    print(f"  MCP:      http://{HOST}:{port}/mcp")
    print(f"  Health:   http://{HOST}:{port}/health")
    print(f"  Rules:    http://{HOST}:{port}/rules/{{system}}")

    await server.serve()
