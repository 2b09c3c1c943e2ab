"""Closed set of list actions and their handlers.

Hosts dispatch actions by name; names are parsed into ``ActionKind`` up front
so a typo is reported instead of silently doing nothing.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field

from ..errors import InvalidParamError
from ..item_model import ExpandRequest, ItemStore, ListItem, SelectionSet
from .host import HostEditor
from .view import ViewProjector

logger = logging.getLogger(__name__)


class ActionFlags(enum.IntFlag):
    """What the host should do after an action returns."""

    NONE = 0
    REFRESH_ITEMS = 1
    REDRAW = 2
    PERSIST = 4


class ActionKind(str, enum.Enum):
    CHOOSE_ACTION = "chooseAction"
    CLEAR_SELECT_ALL_ITEMS = "clearSelectAllItems"
    COLLAPSE_ITEM = "collapseItem"
    EXPAND_ITEM = "expandItem"
    ITEM_ACTION = "itemAction"
    PREVIEW = "preview"
    PREVIEW_PATH = "previewPath"
    QUIT = "quit"
    REFRESH_ITEMS = "refreshItems"
    TOGGLE_ALL_ITEMS = "toggleAllItems"
    TOGGLE_SELECT_ITEM = "toggleSelectItem"
    UPDATE_OPTIONS = "updateOptions"

    @classmethod
    def parse(cls, name: str | ActionKind) -> ActionKind:
        try:
            return cls(name)
        except (TypeError, ValueError):
            raise InvalidParamError(f"Unknown action: {name!r}") from None


class ExpandMode(str, enum.Enum):
    OPEN = "open"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class ItemActionParams:
    name: str = "default"
    items: tuple[ListItem, ...] | None = None
    params: Mapping[str, object] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> ItemActionParams:
        name = raw.get("name", "default")
        if not isinstance(name, str) or not name:
            raise InvalidParamError(f"Invalid item action name: {name!r}")
        items = raw.get("items")
        if items is not None:
            if not isinstance(items, (list, tuple)) or not all(isinstance(item, ListItem) for item in items):
                raise InvalidParamError("itemAction items must be a list of items")
            items = tuple(items)
        params = raw.get("params", {})
        if not isinstance(params, Mapping):
            raise InvalidParamError("itemAction params must be a mapping")
        return cls(name=name, items=items, params=params)


@dataclass(frozen=True)
class ExpandItemParams:
    mode: ExpandMode = ExpandMode.OPEN
    max_level: int = 0

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> ExpandItemParams:
        mode = raw.get("mode") or ExpandMode.OPEN
        try:
            mode = ExpandMode(mode)
        except (TypeError, ValueError):
            raise InvalidParamError(f"Invalid expandItem mode: {mode!r}") from None
        max_level = raw.get("maxLevel", 0)
        if isinstance(max_level, bool) or not isinstance(max_level, int) or max_level < 0:
            raise InvalidParamError(f"Invalid expandItem maxLevel: {max_level!r}")
        return cls(mode=mode, max_level=max_level)


class ListActions:
    """Action handlers over one widget's store, selection, and painted view."""

    def __init__(
        self,
        *,
        store: ItemStore,
        selection: SelectionSet,
        projector: ViewProjector,
        host: HostEditor,
        on_quit: Callable[[], None] | None = None,
    ) -> None:
        self.store = store
        self.selection = selection
        self.projector = projector
        self.host = host
        self.on_quit = on_quit
        self._handlers: dict[ActionKind, Callable[[Mapping[str, object]], Awaitable[ActionFlags]]] = {
            ActionKind.CHOOSE_ACTION: lambda _params: self.choose_action(),
            ActionKind.CLEAR_SELECT_ALL_ITEMS: lambda _params: self.clear_select_all_items(),
            ActionKind.COLLAPSE_ITEM: lambda _params: self.collapse_item_action(),
            ActionKind.EXPAND_ITEM: self._expand_item_from_params,
            ActionKind.ITEM_ACTION: self._item_action_from_params,
            ActionKind.PREVIEW: self.preview,
            ActionKind.PREVIEW_PATH: lambda _params: self.preview_path(),
            ActionKind.QUIT: lambda _params: self.quit(),
            ActionKind.REFRESH_ITEMS: lambda _params: self.refresh_items(),
            ActionKind.TOGGLE_ALL_ITEMS: lambda _params: self.toggle_all_items(),
            ActionKind.TOGGLE_SELECT_ITEM: lambda _params: self.toggle_select_item(),
            ActionKind.UPDATE_OPTIONS: self.update_options,
        }
        missing = [kind.value for kind in ActionKind if kind not in self._handlers]
        if missing:
            raise RuntimeError(f"Unhandled list actions: {', '.join(missing)}")

    async def dispatch(self, name: str | ActionKind, params: Mapping[str, object] | None = None) -> ActionFlags:
        """Run the action named ``name``; raises ``InvalidParamError`` on bad input."""
        kind = ActionKind.parse(name)
        logger.debug("dispatching action %s", kind.value)
        return await self._handlers[kind](params or {})

    async def cursor_index(self) -> int | None:
        """Logical index of the item under the host cursor."""
        return self.projector.resolve_row(await self.host.query_cursor_row())

    async def cursor_item(self) -> ListItem | None:
        idx = await self.cursor_index()
        return self.store.items[idx] if idx is not None else None

    async def target_items(self) -> list[ListItem]:
        """Selected items, or the item under the cursor when nothing is selected."""
        if len(self.selection):
            return self.selection.resolve_items(self.store.items, None)
        return self.selection.resolve_items(self.store.items, await self.cursor_index())

    async def toggle_select_item(self) -> ActionFlags:
        idx = await self.cursor_index()
        if idx is None:
            return ActionFlags.NONE
        self.selection.toggle(idx)
        return ActionFlags.REDRAW

    async def toggle_all_items(self) -> ActionFlags:
        if not self.selection.toggle_all(len(self.store)):
            return ActionFlags.NONE
        return ActionFlags.REDRAW

    async def clear_select_all_items(self) -> ActionFlags:
        self.selection.clear()
        return ActionFlags.REDRAW

    async def refresh_items(self) -> ActionFlags:
        return ActionFlags.REFRESH_ITEMS

    async def item_action(
        self,
        name: str = "default",
        items: Sequence[ListItem] | None = None,
        params: Mapping[str, object] | None = None,
    ) -> ActionFlags:
        """Hand ``items`` (or the cursor/selection items) to the host action ``name``."""
        targets = list(items) if items is not None else await self.target_items()
        if not targets:
            return ActionFlags.NONE
        await self.host.item_action(name, targets, params if params is not None else {})
        return ActionFlags.NONE

    async def choose_action(self) -> ActionFlags:
        targets = await self.target_items()
        if not targets:
            return ActionFlags.NONE
        await self.host.choose_action(targets)
        return ActionFlags.NONE

    async def preview_path(self) -> ActionFlags:
        item = await self.cursor_item()
        if item is None:
            return ActionFlags.NONE
        await self.host.echo(item.text)
        return ActionFlags.PERSIST

    async def preview(self, params: Mapping[str, object] | None = None) -> ActionFlags:
        """Let the host preview the cursor item and pass its flags through."""
        item = await self.cursor_item()
        if item is None:
            return ActionFlags.NONE
        return ActionFlags(await self.host.preview(item, params if params is not None else {}))

    async def quit(self) -> ActionFlags:
        await self.host.quit()
        if self.on_quit is not None:
            self.on_quit()
        return ActionFlags.NONE

    async def expand_item_action(self, mode: ExpandMode = ExpandMode.OPEN, max_level: int = 0) -> ActionFlags:
        """Ask the producer to expand the cursor item, or collapse it in toggle mode."""
        item = await self.cursor_item()
        if item is None:
            return ActionFlags.NONE
        if item.expanded:
            if mode is ExpandMode.TOGGLE:
                return await self._request_collapse(item)
            return ActionFlags.NONE
        await self.host.redraw_tree("expand", [ExpandRequest(item=item, max_level=max_level)])
        return ActionFlags.NONE

    async def collapse_item_action(self) -> ActionFlags:
        item = await self.cursor_item()
        if item is None:
            return ActionFlags.NONE
        return await self._request_collapse(item)

    async def update_options(self, options: Mapping[str, object]) -> ActionFlags:
        await self.host.update_options(options)
        return ActionFlags.NONE

    async def _request_collapse(self, item: ListItem) -> ActionFlags:
        if not item.is_directory:
            return ActionFlags.NONE
        await self.host.redraw_tree("collapse", [ExpandRequest(item=item)])
        return ActionFlags.NONE

    async def _expand_item_from_params(self, raw: Mapping[str, object]) -> ActionFlags:
        params = ExpandItemParams.from_mapping(raw)
        return await self.expand_item_action(params.mode, params.max_level)

    async def _item_action_from_params(self, raw: Mapping[str, object]) -> ActionFlags:
        params = ItemActionParams.from_mapping(raw)
        return await self.item_action(params.name, params.items, params.params)
