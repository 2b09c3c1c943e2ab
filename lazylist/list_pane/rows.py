"""Row text and highlight formatting for painted list rows."""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Sequence

from ..item_model import ListItem
from ..runtime.params import UiParams
from .host import RowHighlight

_SHORT_WORD_RE = re.compile(r"([a-zA-Z])[a-zA-Z]+")
_NON_LETTER_RE = re.compile(r"[^a-zA-Z]")


def display_width(text: str) -> int:
    """Return terminal column width of ``text``.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in {"W", "F"} else 1
    return width


def prompt_prefix(prompt: str) -> str:
    """Blank gutter that lines rows up under a prompt of the same width."""
    if not prompt:
        return ""
    return " " * (1 + display_width(prompt))


def source_name_label(source_name: str, mode: str) -> str:
    """Return the source-name column text for ``mode`` (long/short/no).

    Short names abbreviate each letter run to its first letter when the name
    contains separators, otherwise keep the first two characters.
    """
    if mode == "long":
        return source_name + " "
    if mode == "short":
        if _NON_LETTER_RE.search(source_name):
            return _SHORT_WORD_RE.sub(r"\1", source_name) + " "
        return source_name[:2] + " "
    return ""


def row_prefix(item: ListItem, params: UiParams) -> str:
    return prompt_prefix(params.prompt) + source_name_label(item.source_name, params.display_source_name)


def format_row(item: ListItem, params: UiParams) -> str:
    text = item.text
    suffix = "/" if item.is_directory and not text.endswith("/") else ""
    return row_prefix(item, params) + text + suffix


def format_rows(items: Sequence[ListItem], params: UiParams) -> list[str]:
    return [format_row(item, params) for item in items]


def row_highlights(items: Sequence[ListItem], params: UiParams) -> list[RowHighlight]:
    """Return item highlight spans shifted past each row's prefix."""
    spans: list[RowHighlight] = []
    for row, item in enumerate(items, start=1):
        if not item.highlights:
            continue
        offset = len(row_prefix(item, params))
        for highlight in item.highlights:
            spans.append(
                RowHighlight(
                    row=row,
                    name=highlight.name,
                    hl_group=highlight.hl_group,
                    col=highlight.col + offset,
                    width=highlight.width,
                )
            )
    return spans
