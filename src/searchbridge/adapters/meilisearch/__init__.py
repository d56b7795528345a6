"""Meilisearch adapter."""

from searchbridge.adapters.meilisearch.client import MeilisearchClient
from searchbridge.adapters.meilisearch.factory import MeilisearchAdapterFactory
from searchbridge.adapters.meilisearch.searcher import MeilisearchSearcher

__all__ = ["MeilisearchAdapterFactory", "MeilisearchClient", "MeilisearchSearcher"]
