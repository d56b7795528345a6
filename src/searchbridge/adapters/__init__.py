"""Search adapter layer — Pluggable connectors for search engines.

Built-in adapters:
  - meilisearch: Meilisearch (filter-expression compiler over the REST API)

Implement ``Searcher`` and an adapter factory to connect your own engine.
"""
