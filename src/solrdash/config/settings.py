"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Overrides passed by the CLI (``SOLRDASH_OVERRIDES``, see ``load_settings``)
  2. YAML config file (if specified, see ``Settings.from_yaml``)
  3. Environment variables (``SOLR_*`` for the Solr connection,
     ``SOLRDASH_`` prefix for everything else)
  4. Default values

Settings are read once at process start and handed to the adapter
explicitly; nothing else looks environment variables up at request time.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

CONFIG_FILE_ENV = "SOLRDASH_CONFIG_FILE"
DEFAULT_CONFIG_FILE = "solrdash-config.yaml"
OVERRIDES_ENV = "SOLRDASH_OVERRIDES"


class SolrSettings(BaseSettings):
    """Connection to a single Solr core.

    Example:
        SOLR_URL=http://solr:8983/solr
        SOLR_CORE=logs
        SOLR_TIMEOUT=5000
    """

    model_config = {
        "env_prefix": "SOLR_",
        "case_sensitive": False,
        "frozen": True,
        "extra": "ignore",
    }

    url: str = Field(default="http://localhost:8983/solr", description="Solr base URL")
    core: str = Field(default="your_core_name", description="Solr core (index) name")
    timeout: int = Field(default=30000, gt=0, description="Per-request timeout in milliseconds")
    username: str | None = Field(default=None, description="Basic-auth username")
    password: str | None = Field(default=None, description="Basic-auth password")
    hash_field: str = Field(default="hash", description="Field used as environment discriminator")

    @field_validator("url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def core_url(self) -> str:
        """Base URL of the configured core, e.g. ``http://host:8983/solr/logs``."""
        return f"{self.url}/{self.core}"

    @property
    def has_credentials(self) -> bool:
        """Basic auth is only sent when both username and password are non-empty."""
        return bool(self.username) and bool(self.password)


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=3000, description="Server port")
    workers: int = Field(default=1, description="Number of worker processes")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Server and logging options use the SOLRDASH_ prefix with double
    underscores for nesting: ``SOLRDASH_SERVER__PORT=9090``.  The Solr
    connection keeps its own ``SOLR_*`` variables (see ``SolrSettings``),
    and ``SHOW_UNIQUE_VALUES`` names a field whose distinct values the
    dashboard lists.
    """

    model_config = {
        "env_prefix": "SOLRDASH_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    solr: SolrSettings = Field(default_factory=SolrSettings)
    show_unique_values: str | None = Field(
        default=None,
        validation_alias="SHOW_UNIQUE_VALUES",
        description="Optional field whose distinct values are browsable",
    )
    server: ServerSettings = Field(default_factory=ServerSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @field_validator("solr", mode="before")
    @classmethod
    def _solr_from_mapping(cls, v: Any) -> Any:
        # Build through __init__ so SOLR_* variables fill the keys a mapping leaves out
        if isinstance(v, dict):
            return SolrSettings(**v)
        return v

    @field_validator("show_unique_values")
    @classmethod
    def _blank_to_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @classmethod
    def from_yaml(cls, path: str | Path, overrides: dict[str, Any] | None = None) -> Settings:
        """Load settings from a YAML configuration file.

        Keys present in the YAML file override environment variables;
        anything the file leaves out is still read from the environment.

        Args:
            path: Path to the YAML config file.
            overrides: Nested mapping merged over the file contents.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**_merge(data, overrides or {}))


def load_settings() -> Settings:
    """Load settings for this process.

    Reads the YAML file named by ``SOLRDASH_CONFIG_FILE`` (or
    ``solrdash-config.yaml`` in the working directory when it exists), then
    applies ``SOLRDASH_OVERRIDES``, a JSON object with the same nesting as
    the file.  The CLI uses it to hand its options to uvicorn workers, so
    those options win over both the file and the environment.
    """
    raw = os.environ.get(OVERRIDES_ENV)
    overrides: dict[str, Any] = json.loads(raw) if raw else {}

    yaml_path = Path(os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE))
    if yaml_path.exists():
        return Settings.from_yaml(yaml_path, overrides)
    return Settings(**overrides)


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged
