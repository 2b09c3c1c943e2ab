"""Item model: item types, the logical store, selection, and path expansion."""

from __future__ import annotations

from .expansion import ExpandRequest, resolve_path_expansion
from .selection import SelectionSet
from .store import MAX_ITEMS, ItemStore, subtree_end_index
from .types import ActionData, ItemHighlight, ListItem, path_key

__all__ = [
    "ActionData",
    "ExpandRequest",
    "ItemHighlight",
    "ItemStore",
    "ListItem",
    "MAX_ITEMS",
    "SelectionSet",
    "path_key",
    "resolve_path_expansion",
    "subtree_end_index",
]
