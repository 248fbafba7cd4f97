import pytest

from medsearch.normalize import NormalizedSummary, normalize_summary, segment, split_heading
from medsearch.settings import get_settings


def test_colon_heading_wins_over_newline():
    heading, body = split_heading("Symptoms\nof anemia: fatigue,\npale skin")

    assert heading == "Symptoms\nof anemia"
    assert body == "fatigue, pale skin"


def test_newline_heading_when_no_colon():
    heading, body = split_heading("Overview\nLow hemoglobin. Needs follow up.")

    assert heading == "Overview"
    assert body == "Low hemoglobin. Needs follow up."


def test_period_heading_within_limit():
    heading, body = split_heading("Anemia is common. It affects many people")

    assert heading == "Anemia is common."
    assert body == "It affects many people"


@pytest.mark.parametrize(
    "period_index, expects_heading",
    [(79, True), (80, False), (85, False)],
)
def test_period_heading_boundary(period_index, expects_heading):
    raw = "a" * period_index + ". rest of the text"
    heading, body = split_heading(raw)

    if expects_heading:
        assert heading == "a" * period_index + "."
        assert body == "rest of the text"
    else:
        assert heading is None
        assert body == raw


def test_period_limit_comes_from_settings(monkeypatch):
    monkeypatch.setenv("HEADING_PERIOD_LIMIT", "10")
    get_settings.cache_clear()

    heading, _ = split_heading("Twelve chars. more")

    assert heading is None


def test_empty_heading_is_absent():
    heading, body = split_heading(": fever, cough")

    assert heading is None
    assert body == "fever, cough"


def test_numbered_mode():
    _, body = split_heading("Intro: 1. First item 2. Second item")
    items, numbered = segment(body)

    assert numbered is True
    assert items == ["First item", "Second item"]


@pytest.mark.parametrize("body", ["1) Rest 2) Fluids", "1- Rest 2- Fluids", "1 Rest 2 Fluids"])
def test_numbered_marker_variants(body):
    assert segment(body) == (["Rest", "Fluids"], True)


def test_decimal_numbers_do_not_trigger_numbered_mode():
    items, numbered = segment("Take 1.5mg daily, with food")

    assert numbered is False
    assert items == ["Take 1.5mg daily", "with food"]


def test_delimiter_mode():
    assert segment("Fever, cough, fatigue") == (["Fever", "cough", "fatigue"], False)
    assert segment("Fever; cough • fatigue") == (["Fever", "cough", "fatigue"], False)


def test_single_item_and_empty_body():
    assert segment("  Persistent fatigue  ") == (["Persistent fatigue"], False)
    assert segment("   ") == ([], False)


def test_normalize_summary_from_wrapped_list():
    summary = normalize_summary({"summary": ["Causes:", "1. Iron loss", "2. Poor diet"], "source": "csv"})

    assert summary == NormalizedSummary(heading="Causes", items=["Iron loss", "Poor diet"], numbered=True)


@pytest.mark.parametrize("value", [None, "", "   ", "nil", {"summary": "NIL"}, ["NIL"]])
def test_normalize_summary_empty(value):
    assert normalize_summary(value) == NormalizedSummary(heading=None, items=[], numbered=False)
