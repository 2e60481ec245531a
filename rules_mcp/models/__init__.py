"""
Models Module
Content records and MCP tool types.
"""

from .content import (
    ALL_CATEGORIES,
    CodeType,
    Language,
    ProjectSystem,
    PromptArgument,
    PromptTemplate,
    Resource,
    Rule,
    RuleCategory,
    RuleCollection,
    RuleFilter,
    ToolDefinition,
)
from .tools import (
    # Enums
    ToolCategory,
    MCPErrorCode,

    # Core types
    ToolInput,
    ToolContext,
    ToolResult,
    ToolError,
    ToolHandlerResult,
    ToolMetadata,

    # Validation
    ToolValidationError,
    ToolValidationResult,)

__all__ = [
    # Content
    "ALL_CATEGORIES",
    "CodeType",
    "Language",
    "ProjectSystem",
    "PromptArgument",
    "PromptTemplate",
    "Resource",
    "Rule",
    "RuleCategory",
    "RuleCollection",
    "RuleFilter",
    "ToolDefinition",

    # Tools
    "ToolCategory",
    "MCPErrorCode",
    "ToolInput",
    "ToolContext",
    "ToolResult",
    "ToolError",
    "ToolHandlerResult",
    "ToolMetadata",
    "ToolValidationError",
    "ToolValidationResult",
]
