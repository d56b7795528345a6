"""Adapter Registry — Maps DSN schemes to adapter factories.

A DSN names the engine in its scheme and carries the connection details::

    meilisearch://api-key@127.0.0.1:7700?tls=true

The registry parses the DSN, looks up the factory registered for the
scheme and lets it build a ready-to-use ``Searcher``.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol
from urllib.parse import parse_qsl, unquote, urlsplit

from searchbridge.adapters.base.adapter import Searcher
from searchbridge.adapters.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class AdapterNotFoundError(LookupError):
    """Raised when a requested adapter is not registered."""


class AdapterFactory(Protocol):
    """Builds searchers for one engine from a parsed DSN."""

    @staticmethod
    def get_name() -> str: ...

    def create_searcher(self, dsn: dict[str, Any]) -> Searcher: ...


def parse_dsn(dsn: str) -> dict[str, Any]:
    """Split a DSN string into its parts.

    Returns:
        A mapping with ``scheme``, ``host`` (``""`` when absent), ``query``
        and, when given, ``port``, ``user`` and ``password``.

    Raises:
        ConfigurationError: If the DSN has no scheme or an invalid port.
    """
    parts = urlsplit(dsn)
    if not parts.scheme:
        raise ConfigurationError(f"Invalid DSN '{dsn}': missing scheme.")

    try:
        port = parts.port
    except ValueError as e:
        raise ConfigurationError(f"Invalid DSN '{dsn}': {e}") from e

    parsed: dict[str, Any] = {
        "scheme": parts.scheme,
        "host": parts.hostname or "",
        "query": dict(parse_qsl(parts.query)),
    }
    if port is not None:
        parsed["port"] = port
    if parts.username:
        parsed["user"] = unquote(parts.username)
    if parts.password:
        parsed["password"] = unquote(parts.password)
    return parsed


class AdapterRegistry:
    """Registry of adapter factories keyed by DSN scheme.

    Example:
        >>> registry = AdapterRegistry()
        >>> registry.register(MeilisearchAdapterFactory())
        >>> searcher = registry.create_searcher("meilisearch://127.0.0.1:7700")
    """

    def __init__(self) -> None:
        self._factories: dict[str, AdapterFactory] = {}

    def register(self, factory: AdapterFactory, name: str | None = None) -> None:
        """Register an adapter factory.

        Args:
            factory: The factory to register.
            name: Scheme to register it under; defaults to ``factory.get_name()``.
        """
        name = name or factory.get_name()
        if name in self._factories:
            logger.warning("Overwriting existing adapter registration: %s", name)
        self._factories[name] = factory
        logger.info("Registered adapter: %s", name)

    def get(self, name: str) -> AdapterFactory:
        """Get the factory registered under ``name``.

        Raises:
            AdapterNotFoundError: If no factory is registered under this name.
        """
        if name not in self._factories:
            raise AdapterNotFoundError(
                f"No adapter registered with name '{name}'. "
                f"Available adapters: {list(self._factories.keys())}"
            )
        return self._factories[name]

    def create_searcher(self, dsn: str) -> Searcher:
        """Create a searcher for the engine named by the DSN scheme."""
        parsed = parse_dsn(dsn)
        searcher = self.get(parsed["scheme"]).create_searcher(parsed)
        logger.info("Created %s searcher for host '%s'", parsed["scheme"], parsed["host"])
        return searcher

    @property
    def registered_adapters(self) -> list[str]:
        """List all registered adapter names."""
        return list(self._factories.keys())


def create_default_registry(timeout: float = 30.0) -> AdapterRegistry:
    """Registry with all built-in adapters registered.

    Args:
        timeout: HTTP request timeout in seconds for the built clients.
    """
    from searchbridge.adapters.meilisearch.factory import MeilisearchAdapterFactory

    registry = AdapterRegistry()
    registry.register(MeilisearchAdapterFactory(timeout=timeout))
    return registry
