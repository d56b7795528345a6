"""Integration test fixtures — Docker-based Meilisearch with mock data.

Expects Meilisearch to be running, e.g.:
    docker run -p 7700:7700 -e MEILI_MASTER_KEY=test-master-key getmeili/meilisearch

Seed data is loaded on first use; tests skip when nothing listens on 7700.
"""

from __future__ import annotations

import time
from typing import Any

import httpx
import pytest

MEILISEARCH_HOST = "http://localhost:7700"
MEILISEARCH_KEY = "test-master-key"
INDEX_NAME = "searchbridge-test-articles"

MOCK_DOCUMENTS: list[dict[str, Any]] = [
    {
        "id": "doc-001",
        "title": "Advances in Solar Nowcasting Using Deep Learning",
        "status": "published",
        "views": 120,
        "tags": ["solar", "deep learning"],
        "_geo": {"lat": 48.8566, "lng": 2.3522},
    },
    {
        "id": "doc-002",
        "title": "Transformer Models for Natural Language Understanding",
        "status": "published",
        "views": 45,
        "tags": ["nlp", "transformers"],
        "_geo": {"lat": 52.52, "lng": 13.405},
    },
    {
        "id": "doc-003",
        "title": "Federated Learning for Privacy-Preserving Medical Imaging",
        "status": "draft",
        "views": 3,
        "tags": ["federated learning", "privacy"],
        "_geo": {"lat": 48.8606, "lng": 2.3376},
    },
    {
        "id": "doc-004",
        "title": 'Wind Power "Forecasting" at Scale',
        "status": "archived",
        "views": 80,
        "tags": ["wind", "forecasting"],
        "_geo": {"lat": 40.7128, "lng": -74.006},
    },
]


def _wait_for_service(url: str, timeout: float = 30.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=5)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(1)
    return False


def _wait_for_task(client: httpx.Client, resp: httpx.Response) -> None:
    resp.raise_for_status()
    task_uid = resp.json().get("taskUid")
    if task_uid is None:
        return
    for _ in range(60):
        status = client.get(f"/tasks/{task_uid}").json().get("status")
        if status in ("succeeded", "failed", "canceled"):
            return
        time.sleep(0.5)


def _seed_meilisearch() -> None:
    headers = {"Authorization": f"Bearer {MEILISEARCH_KEY}"}
    with httpx.Client(base_url=MEILISEARCH_HOST, timeout=30, headers=headers) as client:
        _wait_for_task(client, client.delete(f"/indexes/{INDEX_NAME}"))
        _wait_for_task(client, client.post("/indexes", json={"uid": INDEX_NAME, "primaryKey": "id"}))
        _wait_for_task(
            client,
            client.patch(
                f"/indexes/{INDEX_NAME}/settings",
                json={
                    "filterableAttributes": ["id", "status", "views", "tags", "_geo"],
                    "sortableAttributes": ["views", "title"],
                    "searchableAttributes": ["title", "tags"],
                },
            ),
        )
        _wait_for_task(client, client.post(f"/indexes/{INDEX_NAME}/documents", json=MOCK_DOCUMENTS))


@pytest.fixture(scope="session")
def meilisearch_ready() -> str:
    """Ensure Meilisearch is running and seeded."""
    if not _wait_for_service(f"{MEILISEARCH_HOST}/health"):
        pytest.skip(f"Meilisearch not available at {MEILISEARCH_HOST}")
    _seed_meilisearch()
    return MEILISEARCH_HOST
