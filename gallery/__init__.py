"""Infinite-scroll photo gallery service."""

__version__ = "0.1.0"
