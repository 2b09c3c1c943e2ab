"""Ancestor lookup for revealing a path that is not materialized yet."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from .store import ItemStore
from .types import ListItem


@dataclass(frozen=True)
class ExpandRequest:
    """Ask the tree producer to expand ``item`` at least ``max_level`` levels deep.

    ``search`` carries the originally requested path so the host can resolve
    again once the new level is spliced in.
    """

    item: ListItem
    max_level: int = 0
    search: str | None = None


def resolve_path_expansion(store: ItemStore, path: str) -> ExpandRequest | None:
    """Return an expansion request for the nearest present ancestor of ``path``.

    ``path`` itself is checked first, then each parent directory in turn until
    an item with that path key exists or the filesystem root is passed. No
    request is produced when nothing matches or the match is already expanded.
    """
    candidate = path
    required_depth = 0
    while True:
        index = store.find_by_path(candidate)
        parent = str(PurePath(candidate).parent)
        if index is not None or parent == candidate:
            break
        candidate = parent
        required_depth += 1

    if index is None:
        return None
    item = store.items[index]
    if item.expanded:
        return None
    return ExpandRequest(item=item, max_level=required_depth, search=path)
