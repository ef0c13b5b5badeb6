"""Configuration management for portfolioterm.

Loads settings from a YAML configuration file with environment variable
overrides. Supports .env files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from portfolioterm.domain.models import Project

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/portfolioterm.yaml")


class TerminalConfig(BaseModel):
    username: str = Field(default="visitor", description="User shown in the prompt")
    hostname: str = Field(default="portfolio", description="Host shown in the prompt")
    initial_message: str = Field(
        default="Welcome to my portfolio! Type 'help' to see available commands.",
    )
    commands: dict[str, str] = Field(
        default_factory=dict,
        description="Extra or replacement commands that print constant text",
    )
    descriptions: dict[str, str] = Field(
        default_factory=dict,
        description="Help text for commands defined here",
    )

    @field_validator("commands")
    @classmethod
    def _single_word_names(cls, value: dict[str, str]) -> dict[str, str]:
        for name in value:
            if name.split() != [name]:
                raise ValueError(f"command name {name!r} must be a single non-empty word")
        return value


class EndpointConfig(BaseModel):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)
    max_sessions: int = Field(default=256, gt=0)


class ClientConfig(BaseModel):
    base_url: str = Field(default="http://localhost:8080")
    timeout: float = Field(default=10.0, gt=0)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for portfolioterm.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "PORTFOLIOTERM_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    terminal: TerminalConfig = Field(default_factory=TerminalConfig)
    projects: list[Project] = Field(default_factory=list)
    endpoint: EndpointConfig = Field(default_factory=EndpointConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    _drop_env_overridden(yaml_data)

    return Settings(**yaml_data)


def _drop_env_overridden(yaml_data: dict) -> None:
    """Remove YAML sections that an environment variable also sets.

    Init kwargs outrank the environment in pydantic-settings, so a YAML
    value would otherwise shadow the env var that should replace it.
    """
    prefix = Settings.model_config["env_prefix"]
    delimiter = Settings.model_config["env_nested_delimiter"]
    for env_key in os.environ:
        if not env_key.upper().startswith(prefix):
            continue
        path = env_key[len(prefix):].lower().split(delimiter)
        node = yaml_data
        for part in path[:-1]:
            node = node.get(part) if isinstance(node, dict) else None
            if node is None:
                break
        if isinstance(node, dict) and path[-1] in node:
            logger.debug("Environment variable %s overrides YAML value", env_key)
            del node[path[-1]]
