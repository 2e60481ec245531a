"""
Content Tools

Tools described by documents in the content tools directory. A descriptor
bound to a project system queries that system's rules; one without a
system returns its own documentation.
"""

import asyncio
from typing import Any

from rules_mcp.catalog import ContentCatalog
from rules_mcp.errors import UnknownValue
from rules_mcp.models import (
    MCPErrorCode,
    ToolCategory,
    ToolContext,
    ToolDefinition,
    ToolHandlerResult,
    ToolInput,
)
from rules_mcp.tools.base import BaseTool
from rules_mcp.utils import Logger


class ContentTool(BaseTool):
    """Tool whose name, description and schema come from a ToolDefinition."""

    def __init__(self, definition: ToolDefinition, logger: Logger, metadata: dict[str, Any] | None = None):
        super().__init__(logger, metadata)
        self.definition = definition

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def description(self) -> str:
        return self.definition.description

    @property
    def inputSchema(self) -> dict[str, Any]:
        return self.definition.inputSchema

    def checkInput(self, input: ToolInput) -> ToolHandlerResult | None:
        """Return a failure result when input does not match the schema."""
        validation = self.validateInput(input)
        if validation.valid:
            return None
        return self.failure(MCPErrorCode.INVALID_INPUT, f"Invalid input for {self.name}: {validation.summary()}")


class RuleQueryTool(ContentTool):
    """
    Get the rules of one project system.

    OPTIONAL: category ("architecture"|"performance"|"security"|"testing"|"all"),
    language, codeType ("source"|"test")
    """

    def __init__(self, definition: ToolDefinition, catalog: ContentCatalog, logger: Logger):
        if definition.system is None:
            raise ValueError(f"Tool {definition.name} is not bound to a project system")
        super().__init__(definition, logger, {
            'category': ToolCategory.RULES,
            'system': definition.system.value,
        })
        self.catalog = catalog

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Execute rule query."""
        input = input or ToolInput()
        failure = self.checkInput(input)
        if failure:
            return failure

        try:
            # Uncached rules are read from disk
            collection = await asyncio.to_thread(
                self.catalog.get_all_rules,
                self.definition.system,
                category=input.get("category"),
                language=input.get("language"),
                codeType=input.get("codeType"),
            )
        except UnknownValue as e:
            return self.failure(MCPErrorCode.INVALID_PARAMS, str(e))

        self.logger.debug(
            f"{self.name}: {len(collection.rules)} rule(s) for {collection.system.value}"
        )
        return ToolHandlerResult(
            success=True,
            result=self.createSuccessResult(self.catalog.format_rules_as_text(collection))
        )


class DocumentTool(ContentTool):
    """Return the body of the tool's descriptor document."""

    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        failure = self.checkInput(input or ToolInput())
        if failure:
            return failure
        return ToolHandlerResult(
            success=True,
            result=self.createSuccessResult(self.definition.content or self.definition.description)
        )


def build_tool(definition: ToolDefinition, catalog: ContentCatalog, logger: Logger) -> ContentTool:
    """Create the tool implementation for a descriptor."""
    if definition.system is not None:
        return RuleQueryTool(definition, catalog, logger)
    return DocumentTool(definition, logger)
