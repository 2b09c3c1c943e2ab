"""Redraw policy: skip, cursor placement, and saved-cursor restoration.

The coordinator is pure decision logic over store bookkeeping. ``ListUi``
owns the host calls and applies each decision in order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..item_model import ItemStore
from ..runtime.params import UiParams
from .host import SavedCursor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RedrawContext:
    """Producer-side facts for one redraw cycle."""

    done: bool = True
    max_items: int = 0
    sync: bool = False


@dataclass(frozen=True)
class RedrawDecision:
    """Outcome of the redraw policy for one cycle."""

    skip: bool
    close_preview: bool = False
    force_cursor_reset: bool = False
    cursor_row: int = 1
    generation: int = 0


class RedrawCoordinator:
    """Decide how the next paint treats the host cursor."""

    def __init__(self, store: ItemStore) -> None:
        self.store = store

    def decide(self, context: RedrawContext, params: UiParams) -> RedrawDecision:
        store = self.store
        if context.sync and not context.done:
            logger.debug("skipping redraw: synchronous results not done")
            return RedrawDecision(skip=True)

        close_preview = len(store) == 0
        if store.previous_length < 0 and params.ignore_empty and context.max_items == 0:
            logger.debug("skipping redraw: ignoring empty initial results")
            return RedrawDecision(skip=True, close_preview=close_preview)

        cursor_pos = params.cursor_pos if params.cursor_pos >= 0 and store.refreshed else 0
        shrank = store.refreshed and 0 < store.previous_length and len(store) < store.previous_length
        reversed_resized = params.reversed and len(store) != store.previous_length
        force = params.cursor_pos >= 0 or shrank or reversed_resized

        decision = RedrawDecision(
            skip=False,
            close_preview=close_preview,
            force_cursor_reset=force,
            cursor_row=cursor_pos + 1,
            generation=store.generation,
        )
        logger.debug("redraw decision: %s", decision)
        return decision

    def saved_cursor_target(self, saved: SavedCursor | None, rows: Sequence[str]) -> SavedCursor | None:
        """Return ``saved`` when the row it points at still shows the saved text."""
        if saved is None or not rows:
            return None
        if not (1 <= saved.row <= len(rows)):
            return None
        if rows[saved.row - 1] != saved.text:
            return None
        return saved

    def finish(self, decision: RedrawDecision) -> None:
        """Clear the refreshed flag unless a newer refresh landed meanwhile."""
        if self.store.generation == decision.generation:
            self.store.refreshed = False
