"""Rendering of photo batches into the page."""

from __future__ import annotations

from .elements import FALLBACK_LABEL, LOAD_FAILED_TEXT, Element, ErrorMessage, PhotoTile
from .surface import DocumentSurface, RenderSurface, SurfaceEvent

__all__ = [
    "FALLBACK_LABEL",
    "LOAD_FAILED_TEXT",
    "DocumentSurface",
    "Element",
    "ErrorMessage",
    "PhotoTile",
    "RenderSurface",
    "SurfaceEvent",
]
