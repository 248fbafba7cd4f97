"""Title/description decomposition for enumerated summary items."""

from __future__ import annotations

import re
from typing import Any, List, Tuple

from medsearch.normalize.schema import SummaryItem
from medsearch.normalize.sentinel import clean_quotes, resolve_text

_LONG_DASHES = re.compile(r"[–—]")
_PART_START = re.compile(r"(?=\b\d+[.)\s-])")
_LEADING_MARKER = re.compile(r"^\d+[.)\s-]*")
_DASH_SEPARATOR = re.compile(r"(.*?)\s*[—–-]\s*(.*)", re.DOTALL)
_COMMA = re.compile(r"\s*,\s*")


def strip_marker(part: str) -> str:
    return _LEADING_MARKER.sub("", part.strip()).strip()


def split_title(text: str) -> Tuple[str, str]:
    """Split one item into ``(title, description)``.

    Tries the first hyphen, then any spaced dash, then the first comma. Without
    a separator the title is empty and the whole text is the description.
    """
    index = text.find("-")
    if index > -1:
        return clean_quotes(text[:index]), clean_quotes(text[index + 1 :])

    match = _DASH_SEPARATOR.match(text)
    if match:
        return clean_quotes(match.group(1)), clean_quotes(match.group(2))

    pieces = _COMMA.split(text)
    if len(pieces) > 1:
        return clean_quotes(pieces[0]), clean_quotes(", ".join(pieces[1:]))

    return "", clean_quotes(text)


def decompose(raw: str) -> List[SummaryItem]:
    """Break enumerated text into one SummaryItem per non-empty part."""
    normalized = _LONG_DASHES.sub("-", raw or "").strip()

    items: List[SummaryItem] = []
    for part in _PART_START.split(normalized):
        text = strip_marker(part)
        if not text:
            continue
        title, description = split_title(text)
        items.append(SummaryItem(title=title, description=description))
    return items


def summary_items(value: Any) -> List[SummaryItem]:
    """Resolve a summary field and decompose it into items."""
    raw = resolve_text(value)
    if not raw:
        return []
    return decompose(raw)
