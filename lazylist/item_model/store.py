"""Logical item sequence with tree splice operations.

The store owns the authoritative, producer-ordered item list. Tree expansion
splices children directly after their parent and collapse removes the
contiguous run of deeper items that follows it. Every structural change
clears the selection because selected indices cannot survive a splice.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable

from .selection import SelectionSet
from .types import ListItem, path_key

logger = logging.getLogger(__name__)

MAX_ITEMS = 1000


def subtree_end_index(items: list[ListItem], parent_idx: int, level: int | None = None) -> int:
    """Return the first index after the subtree rooted at ``parent_idx``.

    ``level`` defaults to the stored parent's level. Returns ``len(items)``
    when the subtree runs to the end of the sequence.
    """
    if level is None:
        level = items[parent_idx].level
    idx = parent_idx + 1
    while idx < len(items) and items[idx].level > level:
        idx += 1
    return idx


class ItemStore:
    """Ordered, identity-addressed item sequence for one list widget."""

    def __init__(self, selection: SelectionSet | None = None, max_items: int = MAX_ITEMS) -> None:
        self.selection = selection if selection is not None else SelectionSet()
        self.max_items = max(0, max_items)
        self.items: list[ListItem] = []
        self.expanded_paths: set[str] = set()
        self.previous_length = -1
        self.refreshed = False
        self.generation = 0

    def __len__(self) -> int:
        return len(self.items)

    def refresh(self, new_items: Iterable[ListItem]) -> None:
        """Replace the sequence with at most ``max_items`` producer items."""
        self.previous_length = len(self.items)
        self.items = list(itertools.islice(new_items, self.max_items))
        self.selection.clear()
        self.refreshed = True
        self.generation += 1
        logger.debug("refreshed items: %d -> %d", self.previous_length, len(self.items))

    def find_by_identity(self, target: ListItem) -> int | None:
        for idx, item in enumerate(self.items):
            if item is target:
                return idx
        return None

    def find_by_path(self, path: str) -> int | None:
        """Return the first index whose path key equals ``path``."""
        for idx, item in enumerate(self.items):
            if path_key(item) == path:
                return idx
        return None

    def find_by_path_and_source(self, path: str, source_index: int) -> int | None:
        """Return the first index matching both path key and source index."""
        for idx, item in enumerate(self.items):
            if item.source_index == source_index and path_key(item) == path:
                return idx
        return None

    def expand(self, parent: ListItem, children: Iterable[ListItem]) -> None:
        """Splice ``children`` after ``parent`` and store the expanded parent handle.

        A parent that is no longer present gets its children appended at the
        end instead of dropped.
        """
        children = list(children)
        index = self.find_by_path_and_source(path_key(parent), parent.source_index)
        if index is None:
            logger.debug("expand parent %r not found; appending %d children", path_key(parent), len(children))
            self.items.extend(children)
        else:
            self.items[index + 1 : index + 1] = children
            self.items[index] = parent
            self.expanded_paths.add(path_key(parent))
            logger.debug("expanded %r at %d with %d children", path_key(parent), index, len(children))
        self.selection.clear()

    def collapse(self, item: ListItem) -> None:
        """Remove the contiguous subtree under ``item`` and store the collapsed handle."""
        start = self.find_by_path_and_source(path_key(item), item.source_index)
        if start is None:
            self.selection.clear()
            return
        end = subtree_end_index(self.items, start, item.level)
        for descendant in self.items[start + 1 : end]:
            self.expanded_paths.discard(path_key(descendant))
        del self.items[start + 1 : end]
        self.items[start] = item
        self.expanded_paths.discard(path_key(item))
        logger.debug("collapsed %r at %d, removed %d items", path_key(item), start, end - start - 1)
        self.selection.clear()

    def clear(self) -> None:
        """Drop every item handle and tree bookkeeping."""
        self.items = []
        self.expanded_paths.clear()
        self.selection.clear()
