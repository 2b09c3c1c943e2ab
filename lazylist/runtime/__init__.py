"""UI params and their persisted defaults."""

from __future__ import annotations

from .params import UiParams

__all__ = ["UiParams"]
