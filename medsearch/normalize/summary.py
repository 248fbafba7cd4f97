"""Heading/body splitting and list segmentation for narrative summaries."""

from __future__ import annotations

import re
from typing import Any, List, NamedTuple, Optional, Tuple

from medsearch.normalize.schema import NormalizedSummary
from medsearch.normalize.sentinel import resolve_text
from medsearch.settings import get_settings

# A number preceded by start-of-text or whitespace and followed by whitespace,
# with an optional ".", ")" or "-" between: " 1. ", "\n2) ", " 3- ".
NUMBER_MARKER = re.compile(r"(?:^|\s)\d+[.)\-]?\s+")
DELIMITERS = re.compile(r"\s*[,;•]\s*")
_LINE_BREAK = re.compile(r"\r?\n")


class HeadingSplit(NamedTuple):
    heading: Optional[str]
    body: str


def split_heading(raw: str) -> HeadingSplit:
    """Separate an optional leading heading from the body.

    First match wins: text before the first colon, then text before the first
    newline, then the first sentence when its period sits before
    ``heading_period_limit``. The body comes back with line breaks collapsed
    to single spaces.
    """
    heading: Optional[str] = None
    body = raw

    colon = raw.find(":")
    newline = raw.find("\n")
    period = raw.find(".")
    if colon > -1:
        heading, body = raw[:colon].strip(), raw[colon + 1 :]
    elif newline > -1:
        heading, body = raw[:newline].strip(), raw[newline + 1 :]
    elif -1 < period < get_settings().heading_period_limit:
        heading, body = raw[: period + 1].strip(), raw[period + 1 :]

    body = _LINE_BREAK.sub(" ", body).strip()
    return HeadingSplit(heading or None, body)


def segment(body: str) -> Tuple[List[str], bool]:
    """Split a body into items, returning ``(items, numbered)``.

    Numbered mode applies when the body carries whitespace-framed numeric
    markers; the markers are dropped from the items. Otherwise the body is
    split on commas, semicolons and bullets.
    """
    body = body.strip()
    if not body:
        return [], False

    if NUMBER_MARKER.search(body):
        items = [part.strip() for part in NUMBER_MARKER.split(body)]
        return [item for item in items if item], True

    candidates = [part.strip() for part in DELIMITERS.split(body)]
    candidates = [item for item in candidates if item]
    if len(candidates) > 1:
        return candidates, False
    return [body], False


def normalize_summary(value: Any) -> NormalizedSummary:
    """Resolve a summary field and decompose it into heading and items."""
    raw = resolve_text(value)
    if not raw:
        return NormalizedSummary()

    heading, body = split_heading(raw)
    items, numbered = segment(body)
    return NormalizedSummary(heading=heading, items=items, numbered=numbered)
