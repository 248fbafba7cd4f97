"""Sentinel resolution and shape flattening for loosely-typed summary fields.

A summary field arrives as ``None``, a string, a list of strings or a mapping
wrapping either under ``summary``. The upstream generator writes the sentinel
token (``NIL`` by default) where it means "no value". The helpers here collapse
all of that into one raw string, or a list of strings when the source was
list-shaped, and report ``None`` whenever nothing renderable is left.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, List, Optional

from pydantic import BaseModel

from medsearch.settings import get_settings

_WRAPPING_QUOTES = re.compile(r"^[\"']+|[\"']+$")
_LINE_BREAK = re.compile(r"\r?\n")


def is_nil_token(value: Any) -> bool:
    """Return True when ``value`` is the sentinel string, ignoring case and padding."""
    if not isinstance(value, str):
        return False
    return value.strip().upper() == get_settings().sentinel


def clean_quotes(value: str) -> str:
    """Strip wrapping single/double quotes and surrounding whitespace until stable."""
    text = str(value or "").strip()
    while True:
        cleaned = _WRAPPING_QUOTES.sub("", text).strip()
        if cleaned == text:
            return cleaned
        text = cleaned


def _unwrap(value: Any) -> Any:
    while True:
        if isinstance(value, Mapping):
            value = value.get("summary")
        elif isinstance(value, BaseModel) and "summary" in type(value).model_fields:
            value = value.summary
        else:
            return value


def resolve_lines(value: Any) -> Optional[List[str]]:
    """Return the cleaned elements of a list-shaped summary, or None.

    Non-string and sentinel elements are dropped; the rest lose wrapping
    quotes. Any shape other than a sequence resolves to None.
    """
    value = _unwrap(value)
    if not isinstance(value, (list, tuple)):
        return None

    lines: List[str] = []
    for element in value:
        if not isinstance(element, str) or is_nil_token(element):
            continue
        cleaned = clean_quotes(element)
        if cleaned:
            lines.append(cleaned)
    return lines or None


def resolve_text(value: Any) -> Optional[str]:
    """Return the canonical raw summary string, or None when nothing is left."""
    value = _unwrap(value)
    if isinstance(value, str):
        if is_nil_token(value):
            return None
        text = value.strip()
        return text or None
    if isinstance(value, (list, tuple)):
        lines = resolve_lines(value)
        return "\n".join(lines) if lines else None
    return None


def summary_lines(value: Any) -> List[str]:
    """Split the raw summary into trimmed, non-empty lines."""
    raw = resolve_text(value)
    if not raw:
        return []
    return [line.strip() for line in _LINE_BREAK.split(raw) if line.strip()]
