"""Editable demo menu, in the same shape as a CMS menu block export."""

from __future__ import annotations

DEMO_MENU_SECTION: dict[str, object] = {
    "_key": "demo-menu",
    "sectionId": "menu",
    "eyebrow": "Kitchen open 12 - 10pm",
    "title": "Our Menu",
    "intro": "Seasonal plates, small batch wine and a few things we never take off.",
    "accordionBehaviour": "expanded",
    "headingAlignment": "left",
    "categories": [
        {
            "_key": "starters",
            "title": "Starters",
            "tagline": "To share, or not",
            "itemEntryMode": "structured",
            "items": [
                {
                    "_key": "bruschetta",
                    "name": "Bruschetta",
                    "price": "£6.50",
                    "description": "Toasted sourdough, tomato, basil",
                    "dietary": ["VE"],
                },
                {
                    "_key": "calamari",
                    "name": "Salt & Pepper Calamari",
                    "price": "£8.00",
                    "description": "Lemon aioli",
                    "dietary": [],
                },
                {
                    "_key": "olives",
                    "name": "Gordal Olives",
                    "price": "£4.50",
                    "dietary": ["VE", "GF"],
                },
            ],
        },
        {
            "_key": "soups",
            "title": "Soups",
            "itemEntryMode": "text",
            "rawItems": "\n".join(
                [
                    "Soup of the Day",
                    "Ask kitchen for today's selection",
                    "£5.00",
                    "French Onion",
                    "Gruyère crouton",
                    "£6.50",
                ]
            ),
        },
        {
            "_key": "mains",
            "title": "Mains",
            "tagline": "Served with seasonal greens",
            "itemEntryMode": "text",
            "rawItems": "\n".join(
                [
                    "Steak Frites | 8oz bavette, peppercorn sauce | £21",
                    "Fish & Chips | Beer battered haddock, mushy peas | £16.50",
                    "Wild Mushroom Risotto\tParmesan, truffle oil\t£15",
                    "Catch of the Day | Market price",
                    "Sunday Roast - £18pp",
                ]
            ),
        },
        {
            "_key": "pizza",
            "title": "Wood-fired Pizza",
            "itemEntryMode": "text",
            "rawItems": "\n".join(
                [
                    "Margherita 11",
                    "Nduja & Hot Honey 14.5",
                    "Funghi",
                    "£13",
                ]
            ),
        },
        {
            "_key": "sides",
            "title": "Sides",
            "itemEntryMode": "structured",
            "items": [
                {"_key": "fries", "name": "Skin-on Fries", "price": "£4", "dietary": ["VE", "GF"]},
                {"_key": "greens", "name": "Tenderstem Broccoli", "price": "£4.50", "dietary": ["VE"]},
                {"_key": "slaw", "name": "  ", "price": "£3"},
            ],
        },
        {
            "_key": "desserts",
            "title": "Desserts",
            "itemEntryMode": "text",
            "rawItems": "\n".join(
                [
                    "Sticky Toffee Pudding | Clotted cream | £7",
                    "Affogato | £5",
                    "Cheeseboard | Three British cheeses, chutney, crackers | £10",
                ]
            ),
        },
        {
            "_key": "wine",
            "title": "Wine by the Glass",
            "tagline": "175ml",
            "itemEntryMode": "text",
            "rawItems": "\n".join(
                [
                    "House Red 175ml 6.50",
                    "House White 175ml 6.50",
                    "Picpoul de Pinet 8.00",
                ]
            ),
        },
        {
            "_key": "cocktails",
            "title": "Cocktails",
            "itemEntryMode": "text",
            "rawItems": "\n".join(
                [
                    "Negroni\t£9",
                    "Espresso Martini\t£10",
                    "Seasonal Spritz\tAsk for price",
                ]
            ),
        },
        {
            "_key": "soft-drinks",
            "title": "Soft Drinks",
            "itemEntryMode": "text",
            "rawItems": "",
        },
    ],
}
