"""
Rules MCP Server
Development rules, documentation resources and prompt templates over MCP.
"""

__version__ = "1.0.0"
__package_name__ = "rules-mcp-server"
