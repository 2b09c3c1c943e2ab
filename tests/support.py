"""Shared test doubles for list-widget host interactions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from lazylist.errors import RenderError
from lazylist.item_model import ActionData, ExpandRequest, ListItem
from lazylist.list_pane.actions import ActionFlags
from lazylist.list_pane.host import RowHighlight, SavedCursor


def make_item(
    word: str,
    *,
    level: int = 0,
    is_dir: bool = False,
    path: str | None = None,
    expanded: bool = False,
    source_index: int = 0,
    source_name: str = "",
) -> ListItem:
    action = ActionData(path=path, is_directory=is_dir) if (path is not None or is_dir) else None
    return ListItem(
        word=word,
        action=action,
        level=level,
        expanded=expanded,
        source_index=source_index,
        source_name=source_name,
    )


def expanded_copy(item: ListItem, expanded: bool = True) -> ListItem:
    """Return a new handle for ``item`` with a different expansion flag."""
    return ListItem(
        word=item.word,
        display=item.display,
        action=item.action,
        level=item.level,
        expanded=expanded,
        source_index=item.source_index,
        source_name=item.source_name,
        highlights=list(item.highlights),
    )


class FakeHost:
    """Records every host call; behavior is steered through public attributes."""

    def __init__(self) -> None:
        self.cursor_row = 1
        self.saved_cursor: SavedCursor | None = None
        self.render_error: Exception | None = None
        self.rendered: list[dict[str, object]] = []
        self.errors: list[str] = []
        self.cursor_moves: list[tuple[int, int, bool]] = []
        self.tree_requests: list[tuple[str, list[ExpandRequest]]] = []
        self.item_actions: list[tuple[str, list[ListItem], Mapping[str, object]]] = []
        self.chosen: list[list[ListItem]] = []
        self.echoed: list[str] = []
        self.option_updates: list[Mapping[str, object]] = []
        self.preview_closes = 0
        self.preview_flags = ActionFlags.NONE
        self.previewed: list[tuple[ListItem, Mapping[str, object]]] = []
        self.quits = 0

    async def query_cursor_row(self) -> int:
        return self.cursor_row

    async def render_rows(
        self,
        rows: Sequence[str],
        highlights: Sequence[RowHighlight],
        selected_rows: Sequence[int],
        force_cursor_reset: bool,
        cursor_row: int,
    ) -> None:
        if self.render_error is not None:
            raise self.render_error
        self.rendered.append(
            {
                "rows": list(rows),
                "highlights": list(highlights),
                "selected_rows": list(selected_rows),
                "force_cursor_reset": force_cursor_reset,
                "cursor_row": cursor_row,
            }
        )

    async def query_saved_cursor(self) -> SavedCursor | None:
        return self.saved_cursor

    async def set_cursor(self, row: int, col: int, center: bool = False) -> None:
        self.cursor_moves.append((row, col, center))

    async def report_error(self, message: str) -> None:
        self.errors.append(message)

    async def close_preview(self) -> None:
        self.preview_closes += 1

    async def redraw_tree(self, mode: str, requests: Sequence[ExpandRequest]) -> None:
        self.tree_requests.append((mode, list(requests)))

    async def item_action(self, name: str, items: Sequence[ListItem], params: Mapping[str, object]) -> None:
        self.item_actions.append((name, list(items), params))

    async def choose_action(self, items: Sequence[ListItem]) -> None:
        self.chosen.append(list(items))

    async def echo(self, message: str) -> None:
        self.echoed.append(message)

    async def update_options(self, options: Mapping[str, object]) -> None:
        self.option_updates.append(options)

    async def preview(self, item: ListItem, params: Mapping[str, object]) -> ActionFlags:
        self.previewed.append((item, params))
        return self.preview_flags

    async def quit(self) -> None:
        self.quits += 1


def failing_render(message: str = "buffer is locked") -> RenderError:
    return RenderError(message)
