"""Name-list parsing for test/entity name fields.

The field may hold a real list, a stringified list with inconsistent quoting
(``[CBC, "Liver Function Test", LFT]``) or a plain delimited string. String
values run through an ordered chain of strategies; the first one that returns
a non-empty list wins.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, Dict, List, Optional

from medsearch.normalize.sentinel import clean_quotes

logger = logging.getLogger(__name__)

StrategyFunc = Callable[[str], Optional[List[str]]]

# A bare or partially quoted run that is followed by "," or "]".
_BARE_TOKEN = re.compile(r"([\"'])?([a-zA-Z0-9\s\-_/()]+)([\"'])?(?=\s*,|\s*\])")
_LOOSE_TOKEN = re.compile(r"[\"']?([^\"',\]]+?)[\"']?(?=\s*,|\s*\])")
_SEPARATORS = re.compile(r"\s*[,;•\n]\s*")


def _is_bracketed(text: str) -> bool:
    return text.startswith("[") and text.endswith("]")


def _clean_all(values: List[str]) -> List[str]:
    cleaned = [clean_quotes(value) for value in values]
    return [value for value in cleaned if value]


def repaired_json(text: str) -> Optional[List[str]]:
    """Quote bare tokens and parse the result as a JSON list."""
    if not _is_bracketed(text):
        return None

    repaired = _BARE_TOKEN.sub(r'"\2"', text)
    try:
        parsed = json.loads(repaired)
    except (ValueError, RecursionError) as exc:
        logger.debug("Name list %r is not valid JSON after repair: %s", text, exc)
        return None

    if not isinstance(parsed, list):
        return None
    return _clean_all([str(item) for item in parsed if item is not None])


def token_extraction(text: str) -> Optional[List[str]]:
    """Pull quoted or unquoted runs ending at the next "," or "]"."""
    if not _is_bracketed(text):
        return None

    tokens = [match.group(1) for match in _LOOSE_TOKEN.finditer(text[1:])]
    names = _clean_all(tokens)
    if names:
        logger.debug("Recovered %d names from %r by token extraction", len(names), text)
    return names


def delimited(text: str) -> Optional[List[str]]:
    """Split on commas, semicolons, bullets and newlines."""
    pieces = [piece.strip() for piece in _SEPARATORS.split(text)]
    pieces = [piece for piece in pieces if piece]
    if len(pieces) > 1:
        return _clean_all(pieces)
    return None


def whole_string(text: str) -> Optional[List[str]]:
    if _is_bracketed(text) and not text[1:-1].strip():
        return []
    name = clean_quotes(text)
    return [name] if name else []


STRATEGIES: Dict[str, StrategyFunc] = {
    "repaired_json": repaired_json,
    "token_extraction": token_extraction,
    "delimited": delimited,
    "whole_string": whole_string,
}


def register_strategy(name: str, func: StrategyFunc, *, before: Optional[str] = None) -> None:
    """Register a new string strategy, appended or placed ahead of ``before``."""

    if not name:
        raise ValueError("Strategy name must be provided")
    if name in STRATEGIES:
        raise ValueError(f"Strategy '{name}' is already registered")
    if before is None:
        STRATEGIES[name] = func
        return
    if before not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{before}'")

    ordered = list(STRATEGIES.items())
    position = [key for key, _ in ordered].index(before)
    ordered.insert(position, (name, func))
    STRATEGIES.clear()
    STRATEGIES.update(ordered)


def unregister_strategy(name: str) -> None:
    STRATEGIES.pop(name, None)


def available_strategies() -> List[str]:
    """Return strategy identifiers in the order they are tried."""

    return list(STRATEGIES.keys())


def parse_string(text: str) -> List[str]:
    text = text.strip()
    for name, strategy in list(STRATEGIES.items()):
        names = strategy(text)
        if names:
            logger.debug("Name list resolved by strategy %s", name)
            return names
    return []


def parse_names(value: Any) -> List[str]:
    """Parse a name field into an ordered list of clean names. Never raises."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return _clean_all([item for item in value if isinstance(item, str)])
    if isinstance(value, str):
        return parse_string(value)
    return [str(value)]
