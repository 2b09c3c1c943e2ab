"""Exception types surfaced by the list widget core."""

from __future__ import annotations


class LazyListError(Exception):
    """Base class for failures reported through the host error channel."""


class RenderError(LazyListError):
    """Raised by a host when painting the display rows fails."""


class InvalidParamError(LazyListError, ValueError):
    """Raised for unrecognized UI params or malformed action arguments."""
