"""Base searcher interface — What every engine adapter provides.

An adapter turns a neutral ``Search`` into engine calls and returns a
``Result``.  It talks to the engine through a *client capability*: any
object that provides the ``SearchClient`` / ``IndexClient`` protocols
below.  The concrete HTTP client is only one implementation of it, so
tests and embedding applications can inject their own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from searchbridge.models.result import Result
    from searchbridge.models.search import Search


class IndexClient(Protocol):
    """Engine operations scoped to one index."""

    def get_document(self, identifier: str) -> dict[str, Any]:
        """Fetch a single raw document by its identifier.

        Raises:
            ApiError: With ``http_status == 404`` if the document does not exist.
        """
        ...

    def search(self, query: str | None, params: dict[str, Any]) -> dict[str, Any]:
        """Run a query and return the raw response.

        The response holds ``hits`` and, when known, ``totalHits`` or
        ``estimatedTotalHits``.
        """
        ...


class SearchClient(Protocol):
    """Engine client capability."""

    def index(self, name: str) -> IndexClient: ...


class Searcher(ABC):
    """Abstract base class for engine searchers.

    Searchers are stateless between calls: every ``search()`` handles one
    request to completion and returns a fresh ``Result``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique adapter name (e.g., 'meilisearch')."""

    @abstractmethod
    def search(self, search: Search) -> Result:
        """Execute a search request.

        Args:
            search: The neutral search request.

        Returns:
            The lazily hydrated result.
        """
