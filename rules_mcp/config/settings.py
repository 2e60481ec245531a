"""
Settings
Configuration management for the Rules MCP Server.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Content bundled with the package
DEFAULT_CONTENT_PATH = Path(__file__).resolve().parent.parent / "content"

_TRUE_VALUES = ("1", "true", "yes", "on")


def get_content_path(override: str | Path | None = None) -> Path:
    """
    Get the content root directory.

    Priority:
    1. Explicit override (e.g. --content-path)
    2. MCP_CONTENT_PATH env var
    3. Content bundled with the package
    """
    if override:
        return Path(override).expanduser().resolve()

    env_path = os.getenv("MCP_CONTENT_PATH")
    if env_path:
        return Path(env_path).expanduser().resolve()

    return DEFAULT_CONTENT_PATH


def get_recursive() -> bool:
    """Whether resources, prompts and tools are loaded from subdirectories too."""
    return os.getenv("MCP_CONTENT_RECURSIVE", "").strip().lower() in _TRUE_VALUES


@dataclass
class Config:
    """Server configuration."""
    environment: str = "development"
    log_level: str = "DEBUG"
    http_port: int = 8000
    content_path: Path = field(default_factory=get_content_path)
    recursive: bool = False

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


class ConfigManager:
    """Configuration manager - loads and provides config."""

    def __init__(self, content_path: str | Path | None = None):
        self._content_override = content_path
        self._config: Optional[Config] = None

    async def load(self) -> None:
        """Load configuration from environment (and a local .env file)."""
        load_dotenv()
        env = os.getenv("ENVIRONMENT", "development")
        self._config = Config(
            environment=env,
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env != "production" else "INFO"),
            http_port=int(os.getenv("MCP_PORT", os.getenv("HTTP_PORT", "8000"))),
            content_path=get_content_path(self._content_override),
            recursive=get_recursive(),
        )

    def set_content_path(self, content_path: str | Path) -> None:
        """Override the content root; takes effect immediately."""
        self._content_override = content_path
        self.get().content_path = get_content_path(content_path)

    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            # Create default config if not loaded
            self._config = Config(content_path=get_content_path(self._content_override))
        return self._config
