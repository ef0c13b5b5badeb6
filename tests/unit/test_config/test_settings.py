"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from portfolioterm.config.settings import (
    EndpointConfig,
    LoggingConfig,
    Settings,
    TerminalConfig,
    load_settings,
)


class TestSettings:
    """Test configuration models and loading."""

    def test_default_settings(self) -> None:
        """Default Settings should be valid."""
        settings = Settings()
        assert settings.terminal.username == "visitor"
        assert settings.terminal.hostname == "portfolio"
        assert settings.endpoint.port == 8080
        assert settings.projects == []

    def test_terminal_config_defaults(self) -> None:
        config = TerminalConfig()
        assert config.initial_message.startswith("Welcome to my portfolio!")
        assert config.commands == {}

    def test_invalid_port_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EndpointConfig(port=0)

    def test_load_settings_missing_file(self, tmp_path: Path) -> None:
        """load_settings with missing file should return defaults."""
        settings = load_settings(tmp_path / "nonexistent.yaml")
        assert settings.terminal.username == "visitor"

    def test_load_settings_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "term.yaml"
        path.write_text(
            "terminal:\n"
            "  username: guest\n"
            "  commands:\n"
            "    contact: mail me\n"
            "projects:\n"
            "  - id: weather\n"
            "    title: Weather Dashboard\n"
            "logging:\n"
            "  level: DEBUG\n",
            encoding="utf-8",
        )
        settings = load_settings(path)
        assert settings.terminal.username == "guest"
        assert settings.terminal.hostname == "portfolio"
        assert settings.terminal.commands == {"contact": "mail me"}
        assert settings.projects[0].title == "Weather Dashboard"
        assert settings.logging.level == "DEBUG"

    def test_empty_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path).endpoint.port == 8080

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "term.yaml"
        path.write_text("terminal:\n  username: guest\n  hostname: site\n", encoding="utf-8")
        monkeypatch.setenv("PORTFOLIOTERM_TERMINAL__USERNAME", "envuser")
        settings = load_settings(path)
        assert settings.terminal.username == "envuser"
        assert settings.terminal.hostname == "site"

    def test_invalid_project_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("projects:\n  - id: ''\n    title: x\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_settings(path)

    def test_logging_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.file is None

    def test_multi_word_command_name_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("terminal:\n  commands:\n    foo bar: text\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="single non-empty word"):
            load_settings(path)
