"""Normalization of untrusted summary and name-list payload fields."""

from .cards import build_cards
from .items import decompose, split_title, summary_items
from .names import available_strategies, parse_names, register_strategy, unregister_strategy
from .schema import NormalizedSummary, SummaryItem, TestCard
from .sentinel import clean_quotes, is_nil_token, resolve_lines, resolve_text, summary_lines
from .summary import normalize_summary, segment, split_heading

__all__ = [
    "NormalizedSummary",
    "SummaryItem",
    "TestCard",
    "available_strategies",
    "build_cards",
    "clean_quotes",
    "decompose",
    "is_nil_token",
    "normalize_summary",
    "parse_names",
    "register_strategy",
    "resolve_lines",
    "resolve_text",
    "segment",
    "split_heading",
    "split_title",
    "summary_items",
    "summary_lines",
    "unregister_strategy",
]
