"""Meilisearch client — Minimal synchronous REST client built on ``httpx``.

Implements the ``SearchClient`` capability used by ``MeilisearchSearcher``::

    client = MeilisearchClient("http://localhost:7700", api_key="master-key")
    client.index("articles").search("solar", {"limit": 10})
    client.index("articles").get_document("42")

Non-success responses raise ``ApiError`` carrying the HTTP status and the
error ``code`` / ``message`` from Meilisearch's error body.  Network
failures raise ``ConnectionError``.
"""

from __future__ import annotations

import logging
from typing import Any, cast
from urllib.parse import quote

import httpx

from searchbridge.adapters.base.exceptions import ApiError, ConnectionError

logger = logging.getLogger(__name__)


class MeilisearchClient:
    """Synchronous client for the Meilisearch `REST API`_.

    .. _REST API: https://www.meilisearch.com/docs/reference/api/overview

    Args:
        url: Meilisearch instance URL, e.g. ``"http://localhost:7700"``.
        api_key: Master key or API key for authentication.
        timeout: HTTP request timeout in seconds.
        http_client: Pre-built ``httpx.Client`` to use instead of creating one.
    """

    def __init__(
        self,
        url: str = "http://localhost:7700",
        api_key: str | None = None,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout

        headers: dict[str, str] = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"

        self._http = http_client or httpx.Client(
            base_url=self.url,
            timeout=httpx.Timeout(timeout),
            headers=headers,
        )

    def __enter__(self) -> MeilisearchClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()

    def index(self, name: str) -> MeilisearchIndex:
        return MeilisearchIndex(self, name)

    def health(self) -> str:
        """Return the instance status reported by ``/health`` (``"available"`` when up)."""
        data = self.request("GET", "/health")
        return str(data.get("status", "unknown"))

    def request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        """Send a request and decode the JSON response.

        Raises:
            ConnectionError: If Meilisearch cannot be reached.
            ApiError: If Meilisearch answers with a non-success status.
        """
        try:
            resp = self._http.request(method, path, **kwargs)
        except httpx.TransportError as e:
            raise ConnectionError(f"Failed to connect to Meilisearch at {self.url}: {e}") from e

        if resp.is_error:
            raise _api_error(resp)

        return cast(dict[str, Any], resp.json())


class MeilisearchIndex:
    """Operations on one Meilisearch index (uid)."""

    def __init__(self, client: MeilisearchClient, uid: str) -> None:
        self._client = client
        self.uid = uid

    def get_document(self, identifier: str) -> dict[str, Any]:
        """Fetch a document by primary key via ``/indexes/{uid}/documents/{id}``."""
        return self._client.request(
            "GET",
            f"/indexes/{quote(self.uid, safe='')}/documents/{quote(str(identifier), safe='')}",
        )

    def search(self, query: str | None, params: dict[str, Any]) -> dict[str, Any]:
        """Run a search via ``/indexes/{uid}/search``.

        A ``None`` query omits ``q`` so Meilisearch matches all documents.
        """
        payload: dict[str, Any] = dict(params)
        if query is not None:
            payload["q"] = query

        logger.debug("Meilisearch search on '%s': %s", self.uid, payload)
        return self._client.request(
            "POST",
            f"/indexes/{quote(self.uid, safe='')}/search",
            json=payload,
        )


def _api_error(resp: httpx.Response) -> ApiError:
    try:
        body = resp.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    return ApiError(
        resp.status_code,
        message=str(body.get("message") or resp.reason_phrase),
        code=body.get("code"),
        body=body,
    )
