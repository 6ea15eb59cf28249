"""Renderable elements appended to the image container."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from gallery.photos.models import Photo

FALLBACK_LABEL = "Unsplash Photo"
LOAD_FAILED_TEXT = "Failed to load images. Please try again later."


def render_attributes(attributes: dict[str, str]) -> str:
    """Render ``key="value"`` pairs with escaped values, in insertion order."""
    return "".join(f' {key}="{escape(value, quote=True)}"' for key, value in attributes.items())


@dataclass(frozen=True)
class PhotoTile:
    """A link to the photo page wrapping the photo itself."""

    href: str
    src: str
    label: str
    target: str = "_blank"

    kind = "photo"

    @classmethod
    def from_photo(cls, photo: Photo) -> PhotoTile:
        return cls(
            href=photo.link_url,
            src=photo.display_url,
            label=photo.description or FALLBACK_LABEL,
        )

    def to_html(self) -> str:
        link = render_attributes({"href": self.href, "target": self.target})
        img = render_attributes({"src": self.src, "alt": self.label, "title": self.label})
        return f"<a{link}><img{img}></a>"


@dataclass(frozen=True)
class ErrorMessage:
    """User-visible notice that a batch could not be loaded."""

    text: str = LOAD_FAILED_TEXT
    text_align: str = "center"

    kind = "error"

    def to_html(self) -> str:
        style = render_attributes({"style": f"text-align: {self.text_align}"})
        return f"<p{style}>{escape(self.text)}</p>"


Element = PhotoTile | ErrorMessage
