"""Public package surface for lazylist.

Exports ``ListUi``, the explicitly constructed list-widget state object,
plus the item types hosts build and stream into it.
Most implementation lives in ``item_model`` and ``list_pane``.
"""

from __future__ import annotations

from .errors import InvalidParamError, LazyListError, RenderError
from .item_model import ActionData, ItemHighlight, ListItem
from .list_pane import ActionFlags, ActionKind, ExpandMode, ListUi, RedrawContext
from .runtime.params import UiParams

__all__ = [
    "ActionData",
    "ActionFlags",
    "ActionKind",
    "ExpandMode",
    "InvalidParamError",
    "ItemHighlight",
    "LazyListError",
    "ListItem",
    "ListUi",
    "RedrawContext",
    "RenderError",
    "UiParams",
]
