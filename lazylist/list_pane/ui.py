"""List widget state object exposed to the host editor.

``ListUi`` is constructed explicitly by its owner and passed to every entry
point; there is no shared module-level instance. Structural mutations
(``refresh_items``, ``expand_item``, ``collapse_item``) are synchronous and
complete before any host call is awaited, so a host suspension never sees a
half-spliced sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from ..errors import InvalidParamError, RenderError
from ..item_model import ExpandRequest, ItemStore, ListItem, SelectionSet, resolve_path_expansion
from ..runtime.config import load_ui_params
from ..runtime.params import UiParams
from .actions import ActionFlags, ActionKind, ExpandMode, ListActions
from .host import HostEditor
from .redraw import RedrawContext, RedrawCoordinator
from .rows import format_rows, row_highlights
from .view import ViewProjector, display_row_for_index

logger = logging.getLogger(__name__)


class ListUi:
    """One list widget: item store, selection, painted view, and redraw policy."""

    def __init__(self, host: HostEditor, params: UiParams | None = None) -> None:
        self.host = host
        self.params = params if params is not None else load_ui_params()
        self.selection = SelectionSet()
        self.store = ItemStore(self.selection)
        self.projector = ViewProjector(self.store)
        self.coordinator = RedrawCoordinator(self.store)
        self.actions = ListActions(
            store=self.store,
            selection=self.selection,
            projector=self.projector,
            host=host,
            on_quit=self.dispose,
        )

    @property
    def items(self) -> list[ListItem]:
        return self.store.items

    @property
    def view_items(self) -> tuple[ListItem, ...]:
        return self.projector.view_items

    @property
    def expanded_paths(self) -> set[str]:
        return self.store.expanded_paths

    def refresh_items(self, items: Iterable[ListItem]) -> None:
        self.store.refresh(items)

    def expand_item(self, parent: ListItem, children: Iterable[ListItem]) -> None:
        self.store.expand(parent, children)

    def collapse_item(self, item: ListItem) -> None:
        self.store.collapse(item)

    def expand_path(self, path: str) -> ExpandRequest | None:
        return resolve_path_expansion(self.store, path)

    async def search_item(self, item: ListItem) -> bool:
        """Move the host cursor onto ``item``; ``False`` when it is not present."""
        return await self._jump_to_index(self.projector.search_item(item))

    async def search_path(self, path: str) -> bool:
        """Move the host cursor onto the first item whose path key is ``path``."""
        return await self._jump_to_index(self.projector.search_path(path))

    async def reveal_path(self, path: str) -> bool:
        """Jump to ``path``, or ask the producer to expand its nearest collapsed ancestor.

        Returns ``True`` when the cursor moved or an expansion was requested.
        """
        if await self.search_path(path):
            return True
        request = self.expand_path(path)
        if request is None:
            return False
        await self.host.redraw_tree("expand", [request])
        return True

    async def redraw(self, context: RedrawContext, params: UiParams | None = None) -> bool:
        """Paint the current items; returns ``True`` when rows were rendered.

        Failures are reported through the host and leave store, selection,
        and expanded paths exactly as they were.
        """
        params = params if params is not None else self.params
        try:
            params.validate()
        except InvalidParamError as exc:
            await self.report_failure(str(exc))
            return False

        decision = self.coordinator.decide(context, params)
        if decision.close_preview:
            await self.host.close_preview()
        if decision.skip:
            return False

        view_items = self.projector.project(params.reversed)
        rows = format_rows(view_items, params)
        count = len(self.store)
        selected_rows = sorted(
            display_row_for_index(idx, count, params.reversed)
            for idx in self.selection.indices
            if idx < count
        )
        try:
            await self.host.render_rows(
                rows,
                row_highlights(view_items, params),
                selected_rows,
                decision.force_cursor_reset,
                decision.cursor_row,
            )
        except RenderError as exc:
            await self.report_failure("[lazylist] update buffer failed", exc)
            return False

        self.projector.commit(view_items)

        saved = self.coordinator.saved_cursor_target(await self.host.query_saved_cursor(), rows)
        if saved is not None:
            await self.host.set_cursor(saved.row, saved.col)

        self.coordinator.finish(decision)
        return True

    async def do_action(self, name: str | ActionKind, params: Mapping[str, object] | None = None) -> ActionFlags:
        """Dispatch a named action; invalid names or params are reported, not raised."""
        try:
            return await self.actions.dispatch(name, params)
        except InvalidParamError as exc:
            await self.report_failure(str(exc))
            return ActionFlags.NONE

    async def toggle_select_item(self) -> ActionFlags:
        return await self.actions.toggle_select_item()

    async def toggle_all_items(self) -> ActionFlags:
        return await self.actions.toggle_all_items()

    async def clear_select_all_items(self) -> ActionFlags:
        return await self.actions.clear_select_all_items()

    async def item_action(
        self,
        name: str = "default",
        items: Iterable[ListItem] | None = None,
        params: Mapping[str, object] | None = None,
    ) -> ActionFlags:
        return await self.actions.item_action(name, list(items) if items is not None else None, params)

    async def expand_item_action(self, mode: ExpandMode = ExpandMode.OPEN, max_level: int = 0) -> ActionFlags:
        return await self.actions.expand_item_action(mode, max_level)

    async def collapse_item_action(self) -> ActionFlags:
        return await self.actions.collapse_item_action()

    async def preview(self) -> ActionFlags:
        return await self.actions.preview()

    async def quit(self) -> ActionFlags:
        return await self.actions.quit()

    async def report_failure(self, message: str, exc: BaseException | None = None) -> None:
        """Single user-visible failure path: log, then forward to the host."""
        logger.warning("%s", message, exc_info=exc)
        await self.host.report_error(message)
        if exc is not None and str(exc):
            await self.host.report_error(str(exc))

    def dispose(self) -> None:
        self.store.clear()
        self.projector.clear()

    async def _jump_to_index(self, index: int | None) -> bool:
        if index is None:
            return False
        row = self.projector.display_row(index)
        if row is None:
            return False
        await self.host.set_cursor(row, 0, center=True)
        return True
