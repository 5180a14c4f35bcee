import logging

import pytest

from menuboard.models import RawCategory, RawItem
from menuboard.parser import (
    correct_misclassified_price,
    is_price,
    match_trailing_price,
    parse_items,
    parse_structured_items,
    parse_text_items,
    split_delimited,
)


@pytest.mark.parametrize(
    "text",
    ["£6.50", "12", "$5,5", "€10 pp", "18pp", "7 each", "  £4  ", "Market Price", "market", "MP", "m.p.", "Ask for price", "TBD"],
)
def test_is_price_accepts_price_tokens(text):
    assert is_price(text)


@pytest.mark.parametrize("text", ["", None, "6.505", "Serves 2-4", "Bruschetta", "£", "about £5"])
def test_is_price_rejects_other_text(text):
    assert not is_price(text)


def test_delimited_row_splits_name_description_price():
    items = parse_text_items("Bruschetta | Toasted sourdough, tomato | £6.50", "starters")

    assert len(items) == 1
    assert items[0].name == "Bruschetta"
    assert items[0].description == "Toasted sourdough, tomato"
    assert items[0].price == "£6.50"
    assert items[0].key == "starters-raw-0"


def test_delimited_row_keeps_segments_after_price_in_description():
    items = parse_text_items("Steak | £21 | 8oz bavette", "mains")

    assert items[0].price == "£21"
    assert items[0].description == "8oz bavette"


def test_tab_separated_row():
    items = parse_text_items("Wild Mushroom Risotto\tParmesan, truffle oil\t£15", "mains")

    assert (items[0].name, items[0].description, items[0].price) == ("Wild Mushroom Risotto", "Parmesan, truffle oil", "£15")


def test_split_delimited_prefers_pipes_over_tabs():
    assert split_delimited("A\tB | £3") == ["A B", "£3"]


def test_three_line_pattern():
    raw = "Soup of the Day\nAsk kitchen for today's selection\n£5.00"
    items = parse_text_items(raw, "soups")

    assert len(items) == 1
    assert items[0].name == "Soup of the Day"
    assert items[0].description == "Ask kitchen for today's selection"
    assert items[0].price == "£5.00"


def test_name_then_price_line():
    items = parse_text_items("Funghi\n£13\nMargherita 11", "pizza")

    assert [(item.name, item.price) for item in items] == [("Funghi", "£13"), ("Margherita", "11")]
    assert [item.key for item in items] == ["pizza-raw-0", "pizza-raw-2"]


def test_trailing_price_single_line():
    assert match_trailing_price("House Red 175ml 6.50") == ("House Red 175ml", "6.50")


def test_trailing_price_drops_dash_and_keeps_unit():
    items = parse_text_items("Sunday Roast - £18pp", "mains")

    assert items[0].name == "Sunday Roast"
    assert items[0].price == "£18pp"


def test_name_without_price_is_kept():
    items = parse_text_items("Chef's Special", "mains")

    assert items[0].name == "Chef's Special"
    assert items[0].price is None
    assert items[0].description is None


def test_blank_lines_and_whitespace_are_ignored():
    items = parse_text_items("\r\n  Affogato   |  £5  \r\n\r\n", "desserts")

    assert len(items) == 1
    assert items[0].name == "Affogato"
    assert items[0].price == "£5"


def test_line_that_is_only_a_price_yields_no_name():
    assert parse_text_items("£5", "x") == []


def test_misclassified_price_moves_into_price_slot():
    assert correct_misclassified_price("£6", "£7") == (None, "£6")
    assert correct_misclassified_price("Lemon aioli", "£7") == ("Lemon aioli", "£7")
    assert correct_misclassified_price("£6", None) == ("£6", None)


def test_structured_items_are_trimmed_and_nameless_dropped():
    raw_items = [
        RawItem(key="a", name="  Calamari  ", price=" £7 ", description="  ", dietary=[" GF ", "", None]),
        RawItem(key="b", name="   ", price="£3"),
        None,
        RawItem(name="Olives"),
    ]
    items = parse_structured_items(raw_items, "starters")

    assert [item.name for item in items] == ["Calamari", "Olives"]
    assert items[0].price == "£7"
    assert items[0].description is None
    assert items[0].dietary == ("GF",)
    assert items[1].key == "starters-item-3"


def test_parsing_is_idempotent():
    raw = RawCategory(key="mains", title="Mains", item_entry_mode="text", raw_text="Steak | £21\nSoup\n£5")

    assert parse_items(raw, "mains") == parse_items(raw, "mains")


def test_empty_category_logs_warning(caplog):
    raw = RawCategory(key="drinks", title="Drinks", item_entry_mode="text", raw_text="   ")

    with caplog.at_level(logging.WARNING, logger="menuboard.parser"):
        assert parse_items(raw, "drinks") == []

    assert "Drinks" in caplog.text


def test_tab_rows_inside_a_block():
    raw = "Negroni\t£9\nEspresso Martini\tVodka, coffee\t£10\n\nSeasonal Spritz\tAsk for price"
    items = parse_text_items(raw, "cocktails")

    assert [(item.name, item.description, item.price) for item in items] == [
        ("Negroni", None, "£9"),
        ("Espresso Martini", "Vodka, coffee", "£10"),
        ("Seasonal Spritz", None, "Ask for price"),
    ]


def test_spaces_inside_tab_cells_are_collapsed():
    items = parse_text_items("  Wild   Mushroom Risotto \t  Parmesan \t £15  ", "mains")

    assert (items[0].name, items[0].description, items[0].price) == ("Wild Mushroom Risotto", "Parmesan", "£15")


def test_lone_trailing_tab_is_not_a_column():
    items = parse_text_items("Funghi\t\n£13", "pizza")

    assert [(item.name, item.price) for item in items] == [("Funghi", "£13")]
