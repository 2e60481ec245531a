"""
Tool Registry
The set of tools currently served, keyed by name.
"""

import time
from typing import Dict, Iterable, List, Optional

from mcp.types import Tool as MCPTool

from rules_mcp.errors import UnknownEntity
from rules_mcp.models import ToolContext, ToolHandlerResult, ToolInput
from rules_mcp.tools.base import BaseTool


class ToolRegistry:
    """Tool registry; rebuilt from the tool descriptors on every reload."""

    def __init__(self, logger):
        self.logger = logger
        self.tools: Dict[str, BaseTool] = {}

    def __len__(self) -> int:
        return len(self.tools)

    def register(self, tool: BaseTool) -> None:
        if tool.name in self.tools:
            raise ValueError(f"Tool {tool.name} is already registered")
        self.tools[tool.name] = tool
        self.logger.info(f"Tool registered: {tool.name}")

    def replaceAll(self, tools: Iterable[BaseTool]) -> None:
        """
        Swap the served tool set for a new one.

        Raises:
            ValueError: two tools share a name; the current set is kept
        """
        staged: Dict[str, BaseTool] = {}
        for tool in tools:
            if tool.name in staged:
                raise ValueError(f"Tool {tool.name} is already registered")
            staged[tool.name] = tool
        self.tools = staged
        self.logger.info(f"Serving {len(staged)} tools: {', '.join(staged) or '-'}")

    def unregister(self, toolName: str) -> bool:
        removed = self.tools.pop(toolName, None) is not None
        if removed:
            self.logger.info(f"Tool unregistered: {toolName}")
        return removed

    def get(self, toolName: str) -> Optional[BaseTool]:
        return self.tools.get(toolName)

    def hasTool(self, toolName: str) -> bool:
        return toolName in self.tools

    def listTools(self) -> List[BaseTool]:
        return list(self.tools.values())

    async def execute(self, toolName: str, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """
        Run a tool. Exceptions raised by the tool become failed results.

        Raises:
            UnknownEntity: no tool registered under toolName
        """
        tool = self.get(toolName)
        if tool is None:
            raise UnknownEntity("tool", toolName)

        started = time.perf_counter()
        try:
            result = await tool.execute(input, context)
        except Exception as error:
            result = await tool.handleError(error, context)

        tool.logExecution(context, result.success, (time.perf_counter() - started) * 1000)
        return result

    def getToolSchemas(self) -> List[MCPTool]:
        """MCP Tool entries for tools/list."""
        return [
            MCPTool(name=tool.name, description=tool.description, inputSchema=tool.inputSchema)
            for tool in self.listTools()
        ]
