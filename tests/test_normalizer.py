from menuboard.data import demo_menu_section
from menuboard.models import RawCategory, RawItem
from menuboard.normalizer import initial_open_slugs, normalize_categories, slugify
from tests.conftest import make_category


def test_slugify():
    assert slugify("Starters & Sides", "k") == "starters-sides"
    assert slugify("  Wine by the Glass ", "k") == "wine-by-the-glass"
    assert slugify("Café Crème", "k") == "caf-cr-me"
    assert slugify("***", "k") == "k"


def test_blank_text_category_is_excluded():
    raw = [
        RawCategory(key="soft", title="Soft Drinks", item_entry_mode="text", raw_text="  \n "),
        RawCategory(key="mains", title="Mains", item_entry_mode="text", raw_text="Steak | £21"),
    ]

    assert [category.slug for category in normalize_categories(raw)] == ["mains"]


def test_title_and_key_fallbacks():
    raw = [
        None,
        RawCategory(title="  ", items=[RawItem(name="Toast")]),
        RawCategory(key="k2", title="!!!", items=[RawItem(name="Jam")]),
    ]
    categories = normalize_categories(raw)

    assert [(c.key, c.title, c.slug) for c in categories] == [
        ("menu-category-1", "Category 2", "category-2"),
        ("k2", "!!!", "k2"),
    ]
    assert categories[0].items[0].key == "menu-category-1-item-0"


def test_tagline_is_trimmed_or_dropped():
    raw = [
        RawCategory(key="a", title="A", tagline="  small plates ", items=[RawItem(name="x")]),
        RawCategory(key="b", title="B", tagline="   ", items=[RawItem(name="y")]),
    ]
    categories = normalize_categories(raw)

    assert categories[0].tagline == "small plates"
    assert categories[1].tagline is None


def test_duplicate_titles_share_a_slug():
    raw = [
        RawCategory(key="a", title="Specials", items=[RawItem(name="x")]),
        RawCategory(key="b", title="Specials", items=[RawItem(name="y")]),
    ]

    assert [category.slug for category in normalize_categories(raw)] == ["specials", "specials"]


def test_demo_menu_categories():
    categories = normalize_categories(demo_menu_section().categories)

    assert [category.slug for category in categories] == [
        "starters",
        "soups",
        "mains",
        "wood-fired-pizza",
        "sides",
        "desserts",
        "wine-by-the-glass",
        "cocktails",
    ]
    sides = categories[4]
    assert [item.name for item in sides.items] == ["Skin-on Fries", "Tenderstem Broccoli"]


def test_normalizing_twice_gives_equal_results():
    raw = demo_menu_section().categories

    assert normalize_categories(raw) == normalize_categories(raw)


def test_initial_open_slugs():
    categories = [make_category("a"), make_category("b")]

    assert initial_open_slugs(categories, "expanded") == {"a", "b"}
    assert initial_open_slugs(categories, None) == {"a", "b"}
    assert initial_open_slugs(categories, "first-open") == {"a"}
    assert initial_open_slugs([], "first-open") == frozenset()


def test_mixed_pipe_and_tab_rows():
    raw = [
        RawCategory(
            key="mains",
            title="Mains",
            item_entry_mode="text",
            raw_text="Steak Frites | Peppercorn sauce | £21\nWild Mushroom Risotto\tParmesan, truffle oil\t£15\nSunday Roast - £18pp",
        )
    ]
    (mains,) = normalize_categories(raw)

    assert [(item.name, item.description, item.price) for item in mains.items] == [
        ("Steak Frites", "Peppercorn sauce", "£21"),
        ("Wild Mushroom Risotto", "Parmesan, truffle oil", "£15"),
        ("Sunday Roast", None, "£18pp"),
    ]


def test_demo_tab_rows_keep_their_columns():
    categories = {category.slug: category for category in normalize_categories(demo_menu_section().categories)}

    risotto = categories["mains"].items[2]
    assert (risotto.name, risotto.description, risotto.price) == ("Wild Mushroom Risotto", "Parmesan, truffle oil", "£15")
    assert [(item.name, item.price) for item in categories["cocktails"].items] == [
        ("Negroni", "£9"),
        ("Espresso Martini", "£10"),
        ("Seasonal Spritz", "Ask for price"),
    ]
