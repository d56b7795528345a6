"""Shared test fixtures and configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any
from unittest.mock import MagicMock

import pytest

from searchbridge.adapters.meilisearch.searcher import MeilisearchSearcher
from searchbridge.config.settings import Settings
from searchbridge.models.schema import Field, FieldType, Index


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo root handlers and level installed by setup_logging()."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
        engine={"dsn": "meilisearch://test-key@localhost:7700"},
    )


@pytest.fixture
def index() -> Index:
    """A small article index."""
    return Index(
        name="articles",
        fields={
            "id": Field(type=FieldType.IDENTIFIER),
            "title": Field(type=FieldType.TEXT),
            "status": Field(type=FieldType.TEXT, filterable=True),
            "views": Field(type=FieldType.INTEGER, filterable=True, sortable=True),
        },
    )


@pytest.fixture
def sample_hit() -> dict[str, Any]:
    """Sample Meilisearch hit with highlight data."""
    return {
        "id": "1",
        "title": "Solar Nowcasting",
        "status": "published",
        "views": 42,
        "_rankingScore": 0.87,
        "_formatted": {
            "id": "1",
            "title": "<mark>Solar</mark> Nowcasting",
            "status": "published",
            "views": "42",
        },
    }


@pytest.fixture
def client() -> MagicMock:
    """Fake Meilisearch client capability."""
    return MagicMock()


@pytest.fixture
def searcher(client: MagicMock) -> MeilisearchSearcher:
    return MeilisearchSearcher(client)
