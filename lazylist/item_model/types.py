"""Item datatypes shared by the store, selection, and list-pane modules."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ActionData:
    """Action payload fields the list core reads; everything else is opaque."""

    path: str | None = None
    is_directory: bool = False


@dataclass(frozen=True)
class ItemHighlight:
    """Highlight span relative to the item's own text (before any row prefix)."""

    name: str
    hl_group: str
    col: int
    width: int


@dataclass(eq=False)
class ListItem:
    """One producer-built item handle.

    Equality and hashing are by instance: two items with identical text or
    path are still different handles. Lookups that need a content key go
    through ``path_key``.
    """

    word: str
    display: str | None = None
    action: ActionData | None = None
    level: int = 0
    expanded: bool = False
    source_index: int = 0
    source_name: str = ""
    highlights: list[ItemHighlight] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Displayed text, falling back to ``word``."""
        return self.display if self.display is not None else self.word

    @property
    def is_directory(self) -> bool:
        return self.action is not None and self.action.is_directory


def path_key(item: ListItem) -> str:
    """Return the item's explicit action path, or its word when it has none."""
    if item.action is not None and item.action.path is not None:
        return item.action.path
    return item.word
