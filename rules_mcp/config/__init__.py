"""
Config Module
Configuration management.
"""

from .settings import ConfigManager, Config, DEFAULT_CONTENT_PATH, get_content_path, get_recursive

__all__ = [
    "ConfigManager",
    "Config",
    "DEFAULT_CONTENT_PATH",
    "get_content_path",
    "get_recursive",
]
