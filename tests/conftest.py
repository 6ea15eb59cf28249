"""Fixtures — settings and a fake Unsplash API behind httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from gallery.config import Settings


def make_photo_records(count: int, start: int = 0) -> list[dict[str, Any]]:
    return [
        {
            "id": f"p{i}",
            "urls": {"regular": f"https://images.test/{i}.jpg"},
            "links": {"html": f"https://unsplash.test/photos/p{i}"},
            "alt_description": f"photo {i}",
        }
        for i in range(start, start + count)
    ]


class FakeUnsplash:
    """Serves ``count`` photo records per request unless told to fail."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.body: bytes | None = None
        self.error: Exception | None = None
        self.headers: dict[str, str] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return httpx.Response(self.status, headers=self.headers, content=self.body)
        count = int(request.url.params.get("count", "10"))
        start = count * (len(self.requests) - 1)
        return httpx.Response(self.status, content=json.dumps(make_photo_records(count, start)))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        unsplash_access_key="test-key",
        unsplash_api_url="https://api.unsplash.test",
        photo_count=3,
        photo_query="beach",
        scroll_threshold_px=1000,
        scroll_debounce_ms=10,
        max_sessions=5,
    )


@pytest.fixture
def photo_api() -> FakeUnsplash:
    return FakeUnsplash()


@pytest.fixture
def http(photo_api: FakeUnsplash) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(photo_api))
