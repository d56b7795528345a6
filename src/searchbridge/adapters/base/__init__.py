"""Base adapter interface — Abstract classes for search engine connectors."""

from searchbridge.adapters.base.adapter import IndexClient, SearchClient, Searcher
from searchbridge.adapters.base.registry import AdapterRegistry

__all__ = ["AdapterRegistry", "IndexClient", "SearchClient", "Searcher"]
