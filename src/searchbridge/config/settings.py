"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (SEARCHBRIDGE_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class EngineSettings(BaseModel):
    """Search engine connection."""

    dsn: str = Field(
        default="meilisearch://127.0.0.1:7700",
        description="Engine DSN, e.g. meilisearch://api-key@host:7700?tls=true",
    )
    timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds")

    @field_validator("dsn")
    @classmethod
    def _require_scheme(cls, v: str) -> str:
        if "://" not in v:
            raise ValueError(f"DSN must include a scheme (e.g. 'meilisearch://'): {v!r}")
        return v


class HighlightSettings(BaseModel):
    """Default highlight markers."""

    pre_tag: str = Field(default="<mark>", description="Marker inserted before a highlight")
    post_tag: str = Field(default="</mark>", description="Marker inserted after a highlight")


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the SEARCHBRIDGE_ prefix.
    Nested settings use double underscores: SEARCHBRIDGE_ENGINE__DSN=meilisearch://...

    Example:
        SEARCHBRIDGE_ENGINE__DSN=meilisearch://master-key@localhost:7700
        SEARCHBRIDGE_ENGINE__TIMEOUT=10
        SEARCHBRIDGE_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "SEARCHBRIDGE_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    # Application metadata
    app_name: str = Field(default="searchbridge", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Component settings
    engine: EngineSettings = Field(default_factory=EngineSettings)
    highlight: HighlightSettings = Field(default_factory=HighlightSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are used as defaults; environment variables
        still take precedence.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
