"""Tests for configuration."""

from pathlib import Path

import pytest

from rules_mcp.config import Config, ConfigManager, DEFAULT_CONTENT_PATH, get_content_path, get_recursive


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("MCP_CONTENT_PATH", "MCP_CONTENT_RECURSIVE", "ENVIRONMENT", "LOG_LEVEL", "MCP_PORT", "HTTP_PORT"):
        monkeypatch.delenv(name, raising=False)


class TestContentPath:
    """Test content directory resolution."""

    def test_default_is_bundled_content(self):
        assert get_content_path() == DEFAULT_CONTENT_PATH
        assert (DEFAULT_CONTENT_PATH / "rules").is_dir()

    def test_env_var(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MCP_CONTENT_PATH", str(tmp_path))

        assert get_content_path() == tmp_path.resolve()

    def test_override_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MCP_CONTENT_PATH", str(tmp_path / "env"))

        assert get_content_path(tmp_path / "cli") == (tmp_path / "cli").resolve()


class TestRecursive:

    @pytest.mark.parametrize("value,expected", [
        ("1", True),
        ("true", True),
        ("Yes", True),
        ("0", False),
        ("", False),
    ])
    def test_flag(self, monkeypatch, value, expected):
        monkeypatch.setenv("MCP_CONTENT_RECURSIVE", value)

        assert get_recursive() is expected


class TestConfigManager:

    def test_default_config(self):
        config = ConfigManager().get()

        assert isinstance(config, Config)
        assert config.is_development
        assert config.content_path == DEFAULT_CONTENT_PATH
        assert config.recursive is False

    @pytest.mark.asyncio
    async def test_load_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("MCP_PORT", "9000")
        monkeypatch.setenv("MCP_CONTENT_PATH", str(tmp_path))
        monkeypatch.setenv("MCP_CONTENT_RECURSIVE", "true")

        manager = ConfigManager()
        await manager.load()
        config = manager.get()

        assert config.is_production
        assert config.log_level == "INFO"
        assert config.http_port == 9000
        assert config.content_path == tmp_path.resolve()
        assert config.recursive is True

    @pytest.mark.asyncio
    async def test_constructor_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MCP_CONTENT_PATH", str(tmp_path / "env"))

        manager = ConfigManager(content_path=tmp_path / "cli")
        await manager.load()

        assert manager.get().content_path == (tmp_path / "cli").resolve()

    def test_set_content_path(self, tmp_path):
        manager = ConfigManager()
        manager.set_content_path(str(tmp_path))

        assert manager.get().content_path == Path(tmp_path).resolve()
