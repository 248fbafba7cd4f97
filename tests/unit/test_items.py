from medsearch.normalize import SummaryItem, decompose, split_title, summary_items


def test_decompose_single_numbered_item():
    assert decompose("1. Rest - get enough sleep") == [SummaryItem(title="Rest", description="get enough sleep")]


def test_decompose_multiple_items_with_long_dashes():
    raw = "1. Iron supplements — restore stores 2) Diet – leafy greens 3 Follow up"

    assert decompose(raw) == [
        SummaryItem(title="Iron supplements", description="restore stores"),
        SummaryItem(title="Diet", description="leafy greens"),
        SummaryItem(title="", description="Follow up"),
    ]


def test_split_on_first_hyphen_only():
    assert split_title("Hydration - water - electrolytes") == ("Hydration", "water - electrolytes")


def test_comma_separator_fallback():
    items = decompose("1. Fatigue, weakness, pale skin")

    assert items == [SummaryItem(title="Fatigue", description="weakness, pale skin")]


def test_spaced_long_dash_without_hyphen():
    assert split_title("Ferritin – low") == ("Ferritin", "low")
    assert split_title("Ferritin—low") == ("Ferritin", "low")


def test_quotes_are_cleaned_from_title_and_description():
    assert decompose('"Rest" - "sleep well"') == [SummaryItem(title="Rest", description="sleep well")]


def test_item_without_separator_keeps_full_text():
    assert decompose("Consult a physician") == [SummaryItem(title="", description="Consult a physician")]


def test_marker_only_parts_are_skipped():
    assert decompose("1. 2. Rest - sleep") == [SummaryItem(title="Rest", description="sleep")]
    assert decompose("   ") == []


def test_summary_items_resolves_sentinels():
    assert summary_items({"summary": "NIL"}) == []
    assert summary_items(["1. Rest - sleep", "NIL", "2. Fluids - water"]) == [
        SummaryItem(title="Rest", description="sleep"),
        SummaryItem(title="Fluids", description="water"),
    ]
