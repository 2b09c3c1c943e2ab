"""Display-order projection and host row resolution."""

from __future__ import annotations

from collections.abc import Sequence

from ..item_model import ItemStore, ListItem


def project_items(items: Sequence[ListItem], reversed_order: bool) -> tuple[ListItem, ...]:
    """Return a display-ordered copy of ``items``."""
    if reversed_order:
        return tuple(reversed(items))
    return tuple(items)


def display_row_for_index(index: int, count: int, reversed_order: bool) -> int:
    """Map a logical index to its 1-based display row."""
    if reversed_order:
        return count - index
    return index + 1


class ViewProjector:
    """Keep the last painted display order and map host rows back to items.

    ``view_items`` is replaced wholesale on each successful paint and is never
    mutated in place.
    """

    def __init__(self, store: ItemStore) -> None:
        self.store = store
        self.view_items: tuple[ListItem, ...] = ()

    def project(self, reversed_order: bool) -> tuple[ListItem, ...]:
        return project_items(self.store.items, reversed_order)

    def commit(self, view_items: tuple[ListItem, ...]) -> None:
        self.view_items = view_items

    def resolve_row(self, row: int) -> int | None:
        """Return the logical index for 1-based host ``row``.

        ``None`` when the row is outside the painted view or its item has
        since left the store.
        """
        position = row - 1
        if not (0 <= position < len(self.view_items)):
            return None
        return self.store.find_by_identity(self.view_items[position])

    def display_row(self, index: int) -> int | None:
        """Return the 1-based painted row of the item at logical ``index``.

        ``None`` when the index is out of range or the item was not part of
        the last committed view.
        """
        if not (0 <= index < len(self.store.items)):
            return None
        target = self.store.items[index]
        for position, item in enumerate(self.view_items):
            if item is target:
                return position + 1
        return None

    def search_item(self, target: ListItem) -> int | None:
        return self.store.find_by_identity(target)

    def search_path(self, path: str) -> int | None:
        return self.store.find_by_path(path)

    def clear(self) -> None:
        self.view_items = ()
