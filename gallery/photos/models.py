"""Photo records as returned by the Unsplash API."""

from __future__ import annotations

from pydantic import BaseModel, TypeAdapter


class PhotoUrls(BaseModel):
    regular: str


class PhotoLinks(BaseModel):
    html: str


class Photo(BaseModel):
    """A single photo. Only the fields needed for rendering are modelled."""

    urls: PhotoUrls
    links: PhotoLinks
    alt_description: str | None = None

    @property
    def display_url(self) -> str:
        return self.urls.regular

    @property
    def link_url(self) -> str:
        return self.links.html

    @property
    def description(self) -> str | None:
        return self.alt_description


PhotoList = TypeAdapter(list[Photo])
