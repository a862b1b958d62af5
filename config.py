"""Configuration management for ytdash."""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 12


def expand_env_vars(value: Any) -> Any:
    """Recursively expand environment variables in strings, dicts, and lists.

    Supports both ${VAR} and $VAR patterns.
    """
    if isinstance(value, str):
        pattern = re.compile(r'\$\{([^}]+)\}')
        result = pattern.sub(lambda m: os.environ.get(m.group(1), ''), value)
        pattern = re.compile(r'\$([A-Za-z_][A-Za-z0-9_]*)')
        result = pattern.sub(lambda m: os.environ.get(m.group(1), ''), result)
        return result
    elif isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class WebConfig:
    """Web server configuration."""
    host: str = "0.0.0.0"
    port: int = 3000
    session_secret: str = ""  # generated and persisted in settings if not set


@dataclass
class SourceConfig:
    """Remote video listing API."""
    base_url: str = "http://localhost:8080"
    endpoint: str = "/api/v1/videos"
    page_size: int = DEFAULT_PAGE_SIZE
    timeout: float = 10.0  # seconds per page request

    @property
    def url(self) -> str:
        return self.base_url.rstrip("/") + "/" + self.endpoint.lstrip("/")


@dataclass
class DatabaseConfig:
    """Preferences database configuration."""
    path: str = "db/ytdash.db"


@dataclass
class Config:
    """Main configuration container."""
    web: WebConfig = field(default_factory=WebConfig)
    source: SourceConfig = field(default_factory=SourceConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Config":
        """Load configuration from YAML file with environment variable expansion."""
        path = Path(path)
        with open(path, "r") as f:
            raw_config = yaml.safe_load(f) or {}

        expanded_config = expand_env_vars(raw_config)

        web_data = expanded_config.get("web") or {}
        source_data = expanded_config.get("source") or {}
        database_data = expanded_config.get("database") or {}

        return cls(
            web=WebConfig(**web_data),
            source=SourceConfig(**source_data),
            database=DatabaseConfig(**database_data),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration directly from environment variables."""
        return cls(
            web=WebConfig(
                host=os.environ.get("YTD_WEB_HOST", "0.0.0.0"),
                port=int(os.environ.get("YTD_WEB_PORT", "3000")),
                session_secret=os.environ.get("YTD_SESSION_SECRET", ""),
            ),
            source=SourceConfig(
                base_url=os.environ.get("YTD_SOURCE_URL", "http://localhost:8080"),
                endpoint=os.environ.get("YTD_SOURCE_ENDPOINT", "/api/v1/videos"),
                page_size=int(os.environ.get("YTD_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))),
                timeout=float(os.environ.get("YTD_SOURCE_TIMEOUT", "10")),
            ),
            database=DatabaseConfig(
                path=os.environ.get("YTD_DB_PATH", "db/ytdash.db"),
            ),
        )


def load_config(config_path: str | None = None) -> Config:
    """Load configuration from file or environment.

    Tries in order:
    1. Provided config_path
    2. Default paths: config.yaml, config.yml
    3. Environment variables (fallback)
    """
    config: Config | None = None

    if config_path:
        path = Path(config_path)
        if path.exists():
            config = Config.from_yaml(path)
        else:
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for default_path in ["config.yaml", "config.yml"]:
            path = Path(default_path)
            if path.exists():
                config = Config.from_yaml(path)
                break

    if config is None:
        config = Config.from_env()

    if config.source.page_size <= 0:
        logger.warning("source.page_size %r must be positive, using %d",
                       config.source.page_size, DEFAULT_PAGE_SIZE)
        config.source.page_size = DEFAULT_PAGE_SIZE

    if not config.source.base_url.startswith(("http://", "https://")):
        logger.warning("source.base_url %r has no http(s) scheme; page requests will fail",
                       config.source.base_url)

    return config
