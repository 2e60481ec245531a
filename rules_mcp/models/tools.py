"""
Tool types
Requests, results and errors exchanged between the server and its tools.
Result content uses the MCP TextContent type so it can be returned as-is.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from mcp.types import TextContent


class ToolCategory(Enum):
    RULES = "rules"         # Rule query bound to a project system
    DOCUMENT = "document"   # Returns its descriptor body


class MCPErrorCode(Enum):
    """Failure kinds reported in a ToolError."""
    INVALID_INPUT = "INVALID_INPUT"                 # arguments rejected by the input schema
    INVALID_PARAMS = "INVALID_PARAMS"               # arguments name unknown values
    TOOL_EXECUTION_ERROR = "TOOL_EXECUTION_ERROR"   # the tool raised


class ToolInput(dict):
    """Arguments of one tools/call request."""


@dataclass
class ToolContext:
    """Per-call context."""
    requestId: str
    timestamp: float
    toolName: Optional[str] = None

    @classmethod
    def forCall(cls, toolName: str) -> "ToolContext":
        now = time.time()
        return cls(requestId=f"req_{now}", timestamp=now, toolName=toolName)


@dataclass
class ToolResult:
    content: List[TextContent]
    isError: bool = False

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)


@dataclass
class ToolError:
    code: MCPErrorCode
    message: str
    details: Optional[str] = None


@dataclass
class ToolHandlerResult:
    """Outcome of a tool execution; failed results still carry an error ToolResult."""
    success: bool
    result: Optional[ToolResult] = None
    error: Optional[ToolError] = None


@dataclass
class ToolMetadata:
    category: ToolCategory
    version: str
    system: Optional[str] = None


@dataclass
class ToolValidationError:
    field: str
    message: str
    code: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}" if self.field else self.message


@dataclass
class ToolValidationResult:
    valid: bool
    errors: List[ToolValidationError] = field(default_factory=list)

    def summary(self) -> str:
        return "; ".join(str(error) for error in self.errors)
