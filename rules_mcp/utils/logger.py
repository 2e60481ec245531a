"""
Logger
Logging for the Rules MCP Server.

The handler sits on the "rules_mcp" logger, so the module-level loggers of
the catalog (rules_mcp.catalog.*) write through it as well. Output goes to
stderr; stdout carries the stdio protocol.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def parse_level(level: str | int) -> int:
    """Map a level name ("info", "WARNING") to its number; unknown names mean DEBUG."""
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.DEBUG)


class Logger:
    """Logger wrapper handed to the server, registry and tools."""

    def __init__(self, name: str = "rules_mcp", level: str = "DEBUG"):
        self.logger = logging.getLogger(name)
        self.setLevel(level)

        # Only add handler if none exist
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

    def setLevel(self, level: str | int) -> None:
        self.logger.setLevel(parse_level(level))

    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message, extra=extra)

    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(message, extra=extra)

    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(message, extra=extra)

    def error(self, message: str, extra: Optional[dict] = None):
        self.logger.error(message, extra=extra)

    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)
