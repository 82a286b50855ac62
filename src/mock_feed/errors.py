"""Exceptions raised by the feed."""

from __future__ import annotations


class GeometryError(ValueError):
    """Raised when the input polylines cannot carry tracks."""


class NotInitializedError(RuntimeError):
    """Raised when a page is requested before the feed was initialized."""
