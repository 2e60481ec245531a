"""
Tools Module

MCP tools built from the content tools directory:
- rule queries bound to a project system
- documentation tools returning their descriptor body
"""

from .base import BaseTool
from .registry import ToolRegistry
from .rules import ContentTool, DocumentTool, RuleQueryTool, build_tool

__all__ = [
    "BaseTool",
    "ToolRegistry",
    "ContentTool",
    "DocumentTool",
    "RuleQueryTool",
    "build_tool",
]
