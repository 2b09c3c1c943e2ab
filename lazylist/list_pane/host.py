"""Host editor contract consumed by the list widget core.

Every method is a suspension point. The core finishes structural mutations
before awaiting any of them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from ..item_model import ExpandRequest, ListItem

if TYPE_CHECKING:
    from .actions import ActionFlags


@dataclass(frozen=True)
class SavedCursor:
    """Host-persisted cursor position and the row text it was on."""

    row: int
    col: int
    text: str


@dataclass(frozen=True)
class RowHighlight:
    """Highlight span positioned on a rendered row (1-based)."""

    row: int
    name: str
    hl_group: str
    col: int
    width: int


class HostEditor(Protocol):
    async def query_cursor_row(self) -> int: ...

    async def render_rows(
        self,
        rows: Sequence[str],
        highlights: Sequence[RowHighlight],
        selected_rows: Sequence[int],
        force_cursor_reset: bool,
        cursor_row: int,
    ) -> None:
        """Paint ``rows``; raise ``RenderError`` on failure."""
        ...

    async def query_saved_cursor(self) -> SavedCursor | None: ...

    async def set_cursor(self, row: int, col: int, center: bool = False) -> None: ...

    async def report_error(self, message: str) -> None: ...

    async def close_preview(self) -> None: ...

    async def redraw_tree(self, mode: str, requests: Sequence[ExpandRequest]) -> None:
        """Ask the tree producer to ``"expand"`` or ``"collapse"`` items."""
        ...

    async def item_action(self, name: str, items: Sequence[ListItem], params: Mapping[str, object]) -> None: ...

    async def choose_action(self, items: Sequence[ListItem]) -> None: ...

    async def echo(self, message: str) -> None: ...

    async def update_options(self, options: Mapping[str, object]) -> None: ...

    async def preview(self, item: ListItem, params: Mapping[str, object]) -> ActionFlags:
        """Open a preview of ``item``; the returned flags are handed back to the caller."""
        ...

    async def quit(self) -> None:
        """Close the list window."""
        ...
