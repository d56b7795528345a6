"""Meilisearch searcher — Executes neutral searches against Meilisearch.

Two execution strategies:

  1. Identifier lookup: a search for exactly one document by identifier
     (single ``IdentifierCondition``, offset 0, limit 1) is served by the
     document endpoint instead of a full search.  A missing document is a
     normal, empty result.
  2. Everything else compiles the filter tree into a Meilisearch filter
     expression and runs it through the search endpoint.

Hits are hydrated lazily into neutral documents; requested highlights are
copied from each hit's ``_formatted`` section.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Protocol

from searchbridge.adapters.base.adapter import SearchClient, Searcher
from searchbridge.adapters.base.exceptions import ApiError, MalformedHighlightError
from searchbridge.adapters.meilisearch.filters import compile_filters
from searchbridge.marshaller import Marshaller
from searchbridge.models.condition import IdentifierCondition
from searchbridge.models.result import Document, Result
from searchbridge.models.schema import Field, Index
from searchbridge.models.search import Search


class DocumentMarshaller(Protocol):
    def unmarshall(self, fields: dict[str, Field], raw: dict[str, Any]) -> Document: ...


class MeilisearchSearcher(Searcher):
    """Searcher for Meilisearch.

    Args:
        client: Meilisearch client capability (``index(name)`` returning an
            object with ``get_document()`` and ``search()``).
        marshaller: Converts raw hits to neutral documents.  Defaults to a
            ``Marshaller`` reading geo points from Meilisearch's ``_geo``.
    """

    def __init__(self, client: SearchClient, marshaller: DocumentMarshaller | None = None) -> None:
        self._client = client
        self._marshaller = marshaller or Marshaller(
            geo_point_field_config={
                "name": "_geo",
                "latitude": "lat",
                "longitude": "lng",
            },
        )

    @property
    def name(self) -> str:
        return "meilisearch"

    def search(self, search: Search) -> Result:
        """Execute a search against Meilisearch.

        Raises:
            ApiError: Any engine error, except a missing document on the
                identifier lookup path.
            UnsupportedConditionError: If the filter tree holds an unknown condition.
        """
        identifier_condition = search.get_identifier_lookup()
        if identifier_condition is not None:
            return self._fetch_by_identifier(search.index, identifier_condition)

        filters, query = compile_filters(search.index, search.filters)

        params: dict[str, Any] = {}
        if filters:
            params["filter"] = filters

        if search.offset:
            params["offset"] = search.offset

        if search.limit:
            params["limit"] = search.limit

        if search.sort_bys:
            params["sort"] = [f"{field}:{direction}" for field, direction in search.sort_bys.items()]

        if search.highlight_fields:
            params["attributesToHighlight"] = list(search.highlight_fields)
            params["highlightPreTag"] = search.highlight_pre_tag
            params["highlightPostTag"] = search.highlight_post_tag

        data = self._client.index(search.index.name).search(query, params)

        total_count = data.get("totalHits")
        if total_count is None:
            total_count = data.get("estimatedTotalHits")

        return Result(
            self._hits_to_documents(search.index, data.get("hits", []), search.highlight_fields),
            total_count,
        )

    def _fetch_by_identifier(self, index: Index, condition: IdentifierCondition) -> Result:
        try:
            data = self._client.index(index.name).get_document(condition.identifier)
        except ApiError as e:
            if e.http_status != 404:
                raise
            return Result.create_empty()

        return Result(self._hits_to_documents(index, [data], ()), 1)

    def _hits_to_documents(
        self,
        index: Index,
        hits: Iterable[dict[str, Any]],
        highlight_fields: Sequence[str],
    ) -> Iterator[Document]:
        for hit in hits:
            document = self._marshaller.unmarshall(index.fields, hit)

            if not highlight_fields:
                yield document
                continue

            formatted = document.setdefault("_formatted", {})
            if not isinstance(formatted, dict):
                raise MalformedHighlightError('Document with key "_formatted" expected to be a mapping.')

            raw_formatted = hit.get("_formatted")
            for highlight_field in highlight_fields:
                if not isinstance(raw_formatted, dict) or highlight_field not in raw_formatted:
                    raise MalformedHighlightError(f'Expected highlight field "{highlight_field}" to be set.')

                formatted[highlight_field] = raw_formatted[highlight_field]

            yield document
