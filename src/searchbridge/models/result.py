"""Search result — Lazily hydrated documents plus the total hit count."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

Document = dict[str, Any]
"""Neutral document: field name -> value, plus an optional ``_formatted`` mapping."""


class Result(Iterator[Document]):
    """Single-pass iterator over the documents of one search.

    ``total_count`` is the engine's total (or estimated total) of matching
    documents; ``None`` when the engine did not report one.  Documents are
    produced on demand, so re-reading requires running the search again.
    """

    def __init__(self, documents: Iterable[Document], total_count: int | None) -> None:
        self._documents = iter(documents)
        self.total_count = total_count

    def __iter__(self) -> Result:
        return self

    def __next__(self) -> Document:
        return next(self._documents)

    @classmethod
    def create_empty(cls) -> Result:
        return cls(iter(()), 0)
