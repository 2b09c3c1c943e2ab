"""Persistent JSON config helpers.

Stores default UI params for new list widgets.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import asdict, fields
from pathlib import Path

from platformdirs import user_config_dir

from .params import DISPLAY_SOURCE_NAME_MODES, UiParams

APP_NAME = "lazylist"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
UI_PARAMS_KEY = "ui_params"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _coerce_param(name: str, default: object, value: object) -> object | None:
    """Return ``value`` when it has the same JSON type as ``default``, else ``None``.

    Booleans are never accepted for integer params.
    """
    if isinstance(default, bool):
        return value if isinstance(value, bool) else None
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if name == "cursor_pos":
            return max(-1, value)
        return max(0, value)
    if isinstance(default, str):
        if not isinstance(value, str):
            return None
        if name == "display_source_name" and value not in DISPLAY_SOURCE_NAME_MODES:
            return None
        return value
    return None


def load_ui_params(base: UiParams | None = None) -> UiParams:
    """Load persisted UI param defaults on top of ``base``.

    Unknown keys and wrongly typed values are dropped.
    """
    params = base if base is not None else UiParams()
    value = load_config().get(UI_PARAMS_KEY)
    if not isinstance(value, dict):
        return params

    changes: dict[str, object] = {}
    for item in fields(UiParams):
        if item.name not in value:
            continue
        coerced = _coerce_param(item.name, getattr(params, item.name), value[item.name])
        if coerced is not None:
            changes[item.name] = coerced
    return params.updated(**changes)


def save_ui_params(params: UiParams) -> None:
    """Persist ``params`` as the defaults for future widgets."""
    config = load_config()
    config[UI_PARAMS_KEY] = asdict(params.validate())
    save_config(config)
