#!/usr/bin/env python3
"""
Rules MCP Server
Serves development rules (as tools), documentation resources and prompt
templates over the Model Context Protocol.

Catalog reads run in a worker thread: a collection that is not cached yet is
read from disk.
"""

import asyncio
from pathlib import Path
from typing import Optional

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from rules_mcp import __version__, __package_name__
from rules_mcp.catalog import ContentCatalog
from rules_mcp.config import ConfigManager
from rules_mcp.errors import UnknownEntity
from rules_mcp.models import ToolContext, ToolInput
from rules_mcp.tools import ToolRegistry, build_tool
from rules_mcp.utils import Logger


class RulesMCPServer:
    """Main MCP Server for development rules."""

    def __init__(self, content_path: str | Path | None = None, catalog: Optional[ContentCatalog] = None):
        # Initialize configuration
        self.config = ConfigManager(content_path)
        config = self.config.get()

        # Initialize MCP Server
        self.server = Server(__package_name__)

        # Initialize logger
        self.logger = Logger(level=config.log_level)

        self._catalog_injected = catalog is not None
        self.catalog = catalog or ContentCatalog.from_config(config)

        # Initialize tool registry
        self.tool_registry = ToolRegistry(self.logger)

        # Set up MCP protocol handlers
        self._setup_handlers()

    async def initialize(self) -> None:
        """Load configuration, then build the catalog and register content tools."""
        await self.config.load()
        config = self.config.get()
        self.logger.setLevel(config.log_level)

        if not self._catalog_injected:
            self.catalog = ContentCatalog.from_config(config)

        await asyncio.to_thread(self.catalog.preload)
        self.register_tools()
        self.logger.info(f"Serving content from {self.catalog.content_path}")

    def register_tools(self) -> None:
        """Serve one tool per loaded tool descriptor, replacing the previous set."""
        self.tool_registry.replaceAll(
            build_tool(definition, self.catalog, self.logger)
            for definition in self.catalog.get_all_tools()
        )

    # =========================================================================
    # Request handling
    # =========================================================================

    async def _read(self, read, *args):
        return await asyncio.to_thread(read, *args)

    async def list_tools(self) -> list[types.Tool]:
        return self.tool_registry.getToolSchemas()

    async def call_tool(self, name: str, arguments: dict | None) -> list[types.TextContent]:
        if not self.tool_registry.hasTool(name):
            raise UnknownEntity("tool", name)

        context = ToolContext.forCall(name)
        result = await self.tool_registry.execute(name, ToolInput(arguments or {}), context)

        if result.success and result.result:
            return result.result.content

        error_msg = result.error.message if result.error else "Unknown error"
        raise RuntimeError(f"Tool execution failed: {error_msg}")

    async def list_resources(self) -> list[types.Resource]:
        return [
            types.Resource(
                uri=resource.uri,
                name=resource.name,
                description=resource.description,
                mimeType=resource.mimeType,
            )
            for resource in await self._read(self.catalog.get_all_resources)
        ]

    async def read_resource(self, uri: str) -> list[ReadResourceContents]:
        uri = str(uri)
        resource = await self._read(self.catalog.get_resource_by_uri, uri)
        if resource is None and uri.endswith("/"):
            # URL normalisation may append a trailing slash
            resource = await self._read(self.catalog.get_resource_by_uri, uri.rstrip("/"))
        if resource is None:
            raise UnknownEntity("resource", uri)

        return [ReadResourceContents(content=resource.content, mime_type=resource.mimeType)]

    async def list_prompts(self) -> list[types.Prompt]:
        return [
            types.Prompt(
                name=prompt.name,
                description=prompt.description,
                arguments=[
                    types.PromptArgument(
                        name=argument.name,
                        description=argument.description,
                        required=argument.required,
                    )
                    for argument in prompt.arguments
                ],
            )
            for prompt in await self._read(self.catalog.get_all_prompts)
        ]

    async def get_prompt(self, name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
        prompt = await self._read(self.catalog.get_prompt_by_name, name)
        if prompt is None:
            raise UnknownEntity("prompt", name)

        args = {key: value for key, value in (arguments or {}).items() if value is not None}
        missing = prompt.missing_arguments(args)
        if missing:
            raise ValueError(f"Missing required arguments for prompt {name}: {', '.join(missing)}")

        text = await self._read(self.catalog.resolve_template, name, args)
        return types.GetPromptResult(
            description=prompt.description,
            messages=[
                types.PromptMessage(
                    role="user",
                    content=types.TextContent(type="text", text=text),
                )
            ],
        )

    def _setup_handlers(self):
        """Set up MCP protocol request handlers using decorators."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            return await self.list_tools()

        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict) -> list[types.TextContent]:
            try:
                return await self.call_tool(name, arguments)
            except Exception as e:
                self.logger.error(f"Tool call failed for {name}: {e}")
                raise

        @self.server.list_resources()
        async def handle_list_resources() -> list[types.Resource]:
            return await self.list_resources()

        @self.server.read_resource()
        async def handle_read_resource(uri) -> list[ReadResourceContents]:
            try:
                return await self.read_resource(str(uri))
            except UnknownEntity as e:
                self.logger.warning(str(e))
                raise

        @self.server.list_prompts()
        async def handle_list_prompts() -> list[types.Prompt]:
            return await self.list_prompts()

        @self.server.get_prompt()
        async def handle_get_prompt(name: str, arguments: dict[str, str] | None) -> types.GetPromptResult:
            try:
                return await self.get_prompt(name, arguments)
            except (UnknownEntity, ValueError) as e:
                self.logger.warning(str(e))
                raise

    def initialization_options(self) -> InitializationOptions:
        return InitializationOptions(
            server_name=__package_name__,
            server_version=__version__,
            capabilities=self.server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={}
            ),
        )

    async def start(self):
        """Start the MCP server on stdio."""
        try:
            await self.initialize()

            async with stdio_server() as (read_stream, write_stream):
                self.logger.info("Rules MCP Server running on stdio")
                await self.server.run(read_stream, write_stream, self.initialization_options())

        except Exception as e:
            self.logger.error(f"Failed to start server: {e}")
            raise


async def run_stdio(content_path: str | Path | None = None):
    """Run in stdio mode."""
    server = RulesMCPServer(content_path=content_path)
    await server.start()
