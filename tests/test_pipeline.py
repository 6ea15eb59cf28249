"""Fetch-and-render pipeline tests."""

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from gallery.pagination import FetchRenderPipeline, PaginationController
from gallery.photos import DecodeFailed, NetworkError, Photo, RequestFailed, UnsplashClient
from gallery.render import LOAD_FAILED_TEXT, DocumentSurface, ErrorMessage, PhotoTile

pytestmark = pytest.mark.asyncio


def _photos(n: int) -> list[Photo]:
    return [
        Photo.model_validate(
            {"urls": {"regular": f"u{i}"}, "links": {"html": f"l{i}"}, "alt_description": f"d{i}"}
        )
        for i in range(n)
    ]


async def test_appends_one_tile_per_photo_in_order():
    surface = DocumentSurface()
    source = AsyncMock()
    source.random_photos.return_value = _photos(7)

    appended = await FetchRenderPipeline(source, surface, count=7).run()

    assert appended == 7
    assert len(surface.elements) == 7
    assert all(isinstance(e, PhotoTile) for e in surface.elements)
    assert [e.src for e in surface.elements] == [f"u{i}" for i in range(7)]
    assert [e.href for e in surface.elements] == [f"l{i}" for i in range(7)]
    assert [e.label for e in surface.elements] == [f"d{i}" for i in range(7)]
    source.random_photos.assert_awaited_once_with(count=7, query="beach")


async def test_empty_batch_appends_nothing():
    surface = DocumentSurface()
    source = AsyncMock()
    source.random_photos.return_value = []

    assert await FetchRenderPipeline(source, surface).run() == 0
    assert surface.elements == []
    assert surface.loader_hidden is True


async def test_loader_visible_while_fetching():
    surface = DocumentSurface()
    seen: list[bool] = []

    async def fetch(count, query):
        seen.append(surface.loader_hidden)
        return _photos(1)

    source = AsyncMock()
    source.random_photos.side_effect = fetch

    await FetchRenderPipeline(source, surface).run()

    assert seen == [False]
    assert surface.loader_hidden is True


@pytest.mark.parametrize(
    "error",
    [RequestFailed(503), DecodeFailed("bad body"), NetworkError("connection refused")],
)
async def test_each_failure_kind_renders_one_error(error):
    surface = DocumentSurface()
    source = AsyncMock()
    source.random_photos.side_effect = error

    assert await FetchRenderPipeline(source, surface).run() == 0

    assert surface.elements == [ErrorMessage()]
    assert surface.loader_hidden is True


async def test_existing_elements_are_kept():
    surface = DocumentSurface()
    source = AsyncMock()
    source.random_photos.side_effect = [_photos(2), RequestFailed(500), _photos(1)]
    pipeline = FetchRenderPipeline(source, surface)

    await pipeline.run()
    await pipeline.run()
    await pipeline.run()

    kinds = [e.kind for e in surface.elements]
    assert kinds == ["photo", "photo", "error", "photo"]
    assert [e.src for e in surface.elements if isinstance(e, PhotoTile)] == ["u0", "u1", "u0"]


async def test_status_500_scenario(http, photo_api):
    photo_api.status = 500
    photo_api.body = b"Internal Server Error"
    surface = DocumentSurface()
    client = UnsplashClient(http, access_key="k", api_url="https://api.unsplash.test")

    await FetchRenderPipeline(client, surface).run()

    assert len(surface.elements) == 1
    assert surface.elements[0].text == LOAD_FAILED_TEXT
    assert surface.elements[0].text_align == "center"
    assert surface.loader_hidden is True


async def test_null_description_scenario(http, photo_api):
    photo_api.body = json.dumps(
        [{"urls": {"regular": "u1"}, "links": {"html": "l1"}, "alt_description": None}]
    ).encode()
    surface = DocumentSurface()
    client = UnsplashClient(http, access_key="k", api_url="https://api.unsplash.test")

    await FetchRenderPipeline(client, surface).run()

    assert surface.elements == [PhotoTile(href="l1", src="u1", label="Unsplash Photo")]


async def test_network_failure_does_not_raise(http, photo_api):
    photo_api.error = httpx.ConnectTimeout("timed out")
    surface = DocumentSurface()
    client = UnsplashClient(http, access_key="k", api_url="https://api.unsplash.test")

    await FetchRenderPipeline(client, surface).run()

    assert surface.elements == [ErrorMessage()]


async def test_corrupt_compressed_body_renders_error(http, photo_api):
    photo_api.headers = {"content-encoding": "gzip"}
    photo_api.body = b"not gzip at all"
    surface = DocumentSurface()
    client = UnsplashClient(http, access_key="k", api_url="https://api.unsplash.test")
    controller = PaginationController(FetchRenderPipeline(client, surface).run, debounce_wait=0.01)

    task = controller.on_ready()
    await controller.wait_idle()

    assert task.exception() is None
    assert surface.elements == [ErrorMessage()]
    assert surface.loader_hidden is True
    assert not controller.in_flight
