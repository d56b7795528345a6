"""Bootstrap — Build a ready-to-use searcher from settings."""

from __future__ import annotations

import logging
from pathlib import Path

from searchbridge import __version__
from searchbridge.adapters.base.adapter import Searcher
from searchbridge.adapters.base.registry import AdapterRegistry, create_default_registry
from searchbridge.config.settings import Settings
from searchbridge.models.schema import Index
from searchbridge.models.search import Search
from searchbridge.observability.logging import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("searchbridge-config.yaml")


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from ``path``, the default YAML file if present, or the environment."""
    if path is not None:
        return Settings.from_yaml(path)
    if DEFAULT_CONFIG_PATH.exists():
        logger.info("Loading configuration from %s", DEFAULT_CONFIG_PATH)
        return Settings.from_yaml(DEFAULT_CONFIG_PATH)
    return Settings()


def create_searcher(
    settings: Settings | None = None,
    registry: AdapterRegistry | None = None,
) -> Searcher:
    """Create the searcher configured by ``settings.engine.dsn``.

    Args:
        settings: Application settings. If None, loads them via ``load_settings()``.
        registry: Adapter registry. Defaults to the built-in adapters.

    Returns:
        Searcher for the configured engine.
    """
    settings = settings or load_settings()
    setup_logging(settings.observability)

    registry = registry or create_default_registry(timeout=settings.engine.timeout)
    searcher = registry.create_searcher(settings.engine.dsn)
    logger.info("searchbridge v%s using %s adapter", __version__, searcher.name)
    return searcher


def new_search(index: Index, settings: Settings, **kwargs: object) -> Search:
    """Create a ``Search`` using the configured highlight markers unless overridden."""
    kwargs.setdefault("highlight_pre_tag", settings.highlight.pre_tag)
    kwargs.setdefault("highlight_post_tag", settings.highlight.post_tag)
    return Search(index=index, **kwargs)  # type: ignore[arg-type]
