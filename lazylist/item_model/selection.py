"""Selection set over logical item indices."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .types import ListItem

logger = logging.getLogger(__name__)


class SelectionSet:
    """Set of selected logical indices.

    Indices are only meaningful against the sequence they were taken from,
    so the store clears the set on every structural mutation instead of
    remapping.
    """

    def __init__(self) -> None:
        self._indices: set[int] = set()

    def __len__(self) -> int:
        return len(self._indices)

    def __contains__(self, index: object) -> bool:
        return index in self._indices

    @property
    def indices(self) -> list[int]:
        """Selected indices in ascending order."""
        return sorted(self._indices)

    def toggle(self, index: int) -> None:
        if index in self._indices:
            self._indices.remove(index)
        else:
            self._indices.add(index)

    def toggle_all(self, count: int) -> bool:
        """Flip membership of every index in ``range(count)``.

        Returns ``False`` when there is nothing to flip.
        """
        if count <= 0:
            return False
        self._indices.symmetric_difference_update(range(count))
        return True

    def clear(self) -> None:
        if self._indices:
            logger.debug("clearing %d selected indices", len(self._indices))
        self._indices.clear()

    def resolve_items(self, items: Sequence[ListItem], cursor_index: int | None) -> list[ListItem]:
        """Return selected items, or the item under the cursor when none are selected.

        Stale indices that no longer resolve are dropped silently.
        """
        if self._indices:
            return [items[idx] for idx in self.indices if 0 <= idx < len(items)]
        if cursor_index is None or not (0 <= cursor_index < len(items)):
            return []
        return [items[cursor_index]]
