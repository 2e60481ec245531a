"""
Base Tool
Abstract base for the tools the server exposes.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator
from mcp.types import TextContent

from rules_mcp import __version__
from rules_mcp.models import (
    MCPErrorCode,
    ToolCategory,
    ToolContext,
    ToolError,
    ToolHandlerResult,
    ToolInput,
    ToolMetadata,
    ToolResult,
    ToolValidationError,
    ToolValidationResult,
)


def _error_field(error) -> str:
    """Argument a jsonschema error refers to ("" for the whole input)."""
    if error.path:
        return ".".join(str(part) for part in error.path)
    if error.validator == "required":
        # "'name' is a required property"
        return error.message.split("'")[1] if "'" in error.message else ""
    return ""


class BaseTool(ABC):
    """
    A named tool with a JSON Schema for its arguments.

    Subclasses provide name, description, inputSchema and execute(); input
    validation, result construction and error handling live here.
    """

    def __init__(self, logger, metadata: Optional[Dict[str, Any]] = None):
        self.logger = logger
        self.metadata = ToolMetadata(**{
            'category': ToolCategory.DOCUMENT,
            'version': __version__,
            **(metadata or {}),
        })
        self._validator: Optional[Draft7Validator] = None

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def inputSchema(self) -> Dict[str, Any]:
        """JSON Schema of the accepted arguments."""
        pass

    @abstractmethod
    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        pass

    @property
    def validator(self) -> Draft7Validator:
        if self._validator is None:
            self._validator = Draft7Validator(self.inputSchema)
        return self._validator

    def validateInput(self, input: Dict[str, Any]) -> ToolValidationResult:
        """Check arguments against inputSchema, reporting every violation."""
        errors = [
            ToolValidationError(
                field=_error_field(error),
                message=error.message,
                code=str(error.validator).upper(),
            )
            for error in sorted(self.validator.iter_errors(dict(input)), key=lambda e: list(e.path))
        ]
        return ToolValidationResult(valid=not errors, errors=errors)

    def createSuccessResult(self, text: str) -> ToolResult:
        return ToolResult(content=[TextContent(type="text", text=text.strip())])

    def createErrorResult(self, error: ToolError) -> ToolResult:
        return ToolResult(content=[TextContent(type="text", text=error.message)], isError=True)

    def failure(self, code: MCPErrorCode, message: str, details: Optional[str] = None) -> ToolHandlerResult:
        """Failed handler result carrying an error tool result."""
        error = ToolError(code=code, message=message, details=details)
        return ToolHandlerResult(success=False, error=error, result=self.createErrorResult(error))

    async def handleError(self, error: Exception, context: ToolContext) -> ToolHandlerResult:
        """Turn an exception raised by execute() into a failed result."""
        self.logger.error(f"Tool execution error in {self.name}: {error}")
        return self.failure(MCPErrorCode.TOOL_EXECUTION_ERROR, str(error), details=type(error).__name__)

    def logExecution(self, context: ToolContext, success: bool, durationMs: float):
        self.logger.debug(f"Tool executed: {self.name} ({durationMs:.1f} ms)", extra={
            'tool': self.name,
            'success': success,
            'requestId': context.requestId,
        })
