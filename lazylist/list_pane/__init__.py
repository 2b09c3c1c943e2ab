"""List-pane components: view projection, row formatting, redraw policy, actions."""

from .actions import ActionFlags, ActionKind, ExpandMode, ListActions
from .host import HostEditor, RowHighlight, SavedCursor
from .redraw import RedrawContext, RedrawCoordinator, RedrawDecision
from .ui import ListUi
from .view import ViewProjector

__all__ = [
    "ActionFlags",
    "ActionKind",
    "ExpandMode",
    "HostEditor",
    "ListActions",
    "ListUi",
    "RedrawContext",
    "RedrawCoordinator",
    "RedrawDecision",
    "RowHighlight",
    "SavedCursor",
    "ViewProjector",
]
