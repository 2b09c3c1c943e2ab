"""UI params consulted by redraw and row formatting."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from ..errors import InvalidParamError

DISPLAY_SOURCE_NAME_MODES = ("long", "short", "no")


@dataclass(frozen=True)
class UiParams:
    """User-configurable list UI options.

    ``cursor_pos`` is a 0-based row requested after each refresh; ``-1``
    leaves cursor placement to the redraw policy.
    """

    cursor_pos: int = -1
    display_source_name: str = "no"
    ignore_empty: bool = False
    prompt: str = ""
    reversed: bool = False

    def validate(self) -> UiParams:
        """Return ``self`` or raise ``InvalidParamError`` for unusable values."""
        if self.display_source_name not in DISPLAY_SOURCE_NAME_MODES:
            raise InvalidParamError(f"Invalid displaySourceName param: {self.display_source_name}")
        if isinstance(self.cursor_pos, bool) or not isinstance(self.cursor_pos, int):
            raise InvalidParamError(f"Invalid cursorPos param: {self.cursor_pos!r}")
        return self

    def updated(self, **changes: object) -> UiParams:
        """Return a copy with ``changes`` applied; unknown keys are rejected."""
        known = {item.name for item in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise InvalidParamError(f"Unknown UI params: {', '.join(unknown)}")
        return replace(self, **changes)
