"""Meilisearch adapter factory — Builds clients and searchers from DSNs."""

from __future__ import annotations

import logging
from typing import Any

from searchbridge.adapters.base.exceptions import ConfigurationError
from searchbridge.adapters.meilisearch.client import MeilisearchClient
from searchbridge.adapters.meilisearch.searcher import MeilisearchSearcher

logger = logging.getLogger(__name__)

DEFAULT_PORT = 7700

_TRUTHY = {"1", "true", "yes", "on"}


class MeilisearchAdapterFactory:
    """Factory for ``MeilisearchSearcher`` instances.

    Args:
        client: Pre-configured client returned for DSNs without a host
            (``meilisearch://``), e.g. one shared by the application.
        timeout: HTTP request timeout in seconds for clients built from a DSN.
    """

    def __init__(self, client: MeilisearchClient | None = None, timeout: float = 30.0) -> None:
        self._client = client
        self._timeout = timeout

    @staticmethod
    def get_name() -> str:
        return "meilisearch"

    def create_searcher(self, dsn: dict[str, Any]) -> MeilisearchSearcher:
        return MeilisearchSearcher(self.create_client(dsn))

    def create_client(self, dsn: dict[str, Any]) -> MeilisearchClient:
        """Create a client from a parsed DSN.

        Args:
            dsn: Mapping with ``host``, optional ``port`` and ``user`` (the
                API key) and a ``query`` mapping; ``query["tls"]`` switches
                to HTTPS.

        Raises:
            ConfigurationError: If the DSN has no host and no client was given.
        """
        if not dsn.get("host"):
            if self._client is None:
                raise ConfigurationError("Unknown Meilisearch client.")
            return self._client

        tls = str(dsn.get("query", {}).get("tls", "")).lower() in _TRUTHY
        url = f"{'https' if tls else 'http'}://{dsn['host']}:{dsn.get('port') or DEFAULT_PORT}"

        logger.info("Creating Meilisearch client for %s", url)
        return MeilisearchClient(url, api_key=dsn.get("user"), timeout=self._timeout)
