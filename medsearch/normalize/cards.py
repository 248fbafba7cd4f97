"""Test-card assembly from the ``tests_details`` field."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, List, Optional

from medsearch.normalize.names import parse_names
from medsearch.normalize.schema import TestCard


def coerce_score(value: Any) -> Optional[float]:
    """Keep a score only when it is a real, finite number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def name_source(entry: Any) -> Any:
    if isinstance(entry, Mapping):
        for key in ("test_name", "name"):
            if entry.get(key) is not None:
                return entry[key]
    return entry


def build_card(entry: Any) -> Optional[TestCard]:
    score = coerce_score(entry.get("score")) if isinstance(entry, Mapping) else None
    names = parse_names(name_source(entry))
    if not names:
        return None
    return TestCard(score=score, names=names)


def build_cards(raw: Any) -> Optional[List[TestCard]]:
    """Build test cards, returning None when nothing is renderable."""
    if raw is None:
        return None

    if isinstance(raw, (list, tuple)):
        cards = [build_card(entry) for entry in raw]
        return [card for card in cards if card is not None] or None

    if isinstance(raw, str):
        names = parse_names(raw)
        return [TestCard(names=names)] if names else None

    return None
