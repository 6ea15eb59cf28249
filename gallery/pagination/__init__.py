"""Pagination: scroll-driven scheduling of fetch-and-render runs."""

from __future__ import annotations

from .controller import PaginationController, ScrollPosition
from .debounce import Debouncer
from .pipeline import FetchRenderPipeline, PhotoSource

__all__ = [
    "Debouncer",
    "FetchRenderPipeline",
    "PaginationController",
    "PhotoSource",
    "ScrollPosition",
]
