"""
Menu item parsing for structured CMS items and pasted plain text.

Plain text is resolved line by line through an ordered set of steps:

  1. delimited rows   "Name | description | £6.50" or tab-separated cells
  2. trailing price   "House Red 175ml 6.50"
  3. look-ahead       name / description / price on separate lines
                      (the shape Google's menu copy produces)
  4. correction       a captured description that is itself a price

Anything that does not yield a name is dropped; bad content never raises.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from menuboard.models import ParsedMenuItem, RawCategory, RawItem

logger = logging.getLogger(__name__)

PRICE_SEGMENT_RE = re.compile(
    r"(?:£|\$|€)?\s*\d+(?:[.,]\d{1,2})?(?:\s?(?:pp|per|each))?",
    re.IGNORECASE,
)
PRICE_TEXT_RE = re.compile(
    r"(?:market(?:\s+price)?|m\.?p\.?|mp|ask\s+for\s+price|tbd)",
    re.IGNORECASE,
)
TRAILING_PRICE_RE = re.compile(
    r"(?:£|\$|€)?\s?\d[\d.,]*(?:\s?(?:pp|per|each))?$",
    re.IGNORECASE,
)
_WHITESPACE_RE = re.compile(r"\s+")
_LINE_SPACE_RE = re.compile(r"[^\S\t]+")
_TRAILING_DASH_RE = re.compile(r"[–—-]\s*$")
_LINE_BREAK_RE = re.compile(r"\r?\n+")


def clean_text(value: str) -> str:
    """Collapse whitespace runs and trim."""
    return _WHITESPACE_RE.sub(" ", value).strip()


def clean_name(value: str) -> str:
    """Clean an item name, dropping a dangling dash left by the price split."""
    return clean_text(_TRAILING_DASH_RE.sub("", value))


def is_price(value: str | None) -> bool:
    """Return True when the whole text is a price token."""
    if not value:
        return False
    normalized = clean_text(value)
    if not normalized:
        return False
    return bool(PRICE_SEGMENT_RE.fullmatch(normalized) or PRICE_TEXT_RE.fullmatch(normalized))


def split_lines(raw_text: str) -> list[str]:
    """Split pasted text into trimmed, non-empty lines; tabs survive as cell separators."""
    lines = (_LINE_SPACE_RE.sub(" ", line).strip() for line in _LINE_BREAK_RE.split(raw_text))
    return [line for line in lines if line]


def split_delimited(line: str) -> list[str]:
    """Split a row on pipes, or on tabs when there are no pipe columns."""
    by_pipe = [clean_text(part) for part in line.split("|")]
    by_pipe = [part for part in by_pipe if part]
    if len(by_pipe) > 1:
        return by_pipe
    by_tab = [clean_text(part) for part in line.split("\t")]
    return [part for part in by_tab if part]


def parse_delimited(parts: Sequence[str]) -> tuple[str, str | None, str | None]:
    """Resolve `[name, *rest]` cells into (name, price, description)."""
    raw_name, *rest = parts
    name = clean_name(raw_name)
    if not rest:
        return (name, None, None)

    price_index = next((idx for idx, segment in enumerate(rest) if is_price(segment)), None)
    if price_index is None:
        description_parts = [clean_text(segment) for segment in rest]
        return (name, None, " | ".join(part for part in description_parts if part) or None)

    price = clean_text(rest[price_index])
    description_parts = [clean_text(segment) for segment in rest[:price_index] + rest[price_index + 1 :]]
    description = " | ".join(part for part in description_parts if part) or None
    return (name, price, description)


def match_trailing_price(line: str) -> tuple[str, str | None]:
    """Split a single-cell line into (name, price) on a price at its end."""
    match = TRAILING_PRICE_RE.search(line)
    if match is None:
        return (clean_name(line), None)
    return (clean_name(line[: match.start()]), clean_text(match.group(0)))


def look_ahead_price(lines: Sequence[str], index: int) -> tuple[str | None, str | None, int]:
    """
    Look past a priceless name line for its description and price.

    Returns (description, price, consumed) where consumed is how many
    following lines belong to the item.
    """
    next_line = lines[index + 1] if index + 1 < len(lines) else None
    next_next = lines[index + 2] if index + 2 < len(lines) else None

    if next_line and next_next and is_price(next_next):
        return (clean_text(next_line), clean_text(next_next), 2)
    if next_line and is_price(next_line):
        return (None, clean_text(next_line), 1)
    return (None, None, 0)


def correct_misclassified_price(description: str | None, price: str | None) -> tuple[str | None, str | None]:
    """Move a price-looking description into the price slot."""
    if description and price and is_price(description):
        return (None, description)
    return (description, price)


def parse_text_items(raw_text: str, category_key: str) -> list[ParsedMenuItem]:
    """Parse pasted menu text into items."""
    lines = split_lines(raw_text or "")
    items: list[ParsedMenuItem] = []

    index = 0
    while index < len(lines):
        line = lines[index]
        price: str | None = None
        description: str | None = None
        consumed = 0

        parts = split_delimited(line)
        if len(parts) > 1:
            name, price, description = parse_delimited(parts)
        else:
            name, price = match_trailing_price(clean_text(line))
            if not price:
                description, price, consumed = look_ahead_price(lines, index)

        description, price = correct_misclassified_price(description, price)

        if name:
            items.append(
                ParsedMenuItem(
                    key=f"{category_key}-raw-{index}",
                    name=name,
                    price=price,
                    description=description,
                )
            )

        index += consumed + 1

    return items


def normalize_dietary(dietary: Sequence[str | None] | None) -> tuple[str, ...]:
    """Trim dietary tags and drop blanks and non-strings."""
    if not dietary:
        return ()
    tags = (tag.strip() for tag in dietary if isinstance(tag, str))
    return tuple(tag for tag in tags if tag)


def parse_structured_items(raw_items: Sequence[RawItem | None] | None, category_key: str) -> list[ParsedMenuItem]:
    """Map authored items to parsed items, skipping nameless ones."""
    items: list[ParsedMenuItem] = []
    for idx, raw in enumerate(raw_items or []):
        if raw is None:
            continue
        name = raw.name.strip() if isinstance(raw.name, str) else ""
        if not name:
            continue
        items.append(
            ParsedMenuItem(
                key=raw.key or f"{category_key}-item-{idx}",
                name=name,
                price=raw.price.strip() or None if isinstance(raw.price, str) else None,
                description=raw.description.strip() or None if isinstance(raw.description, str) else None,
                dietary=normalize_dietary(raw.dietary),
            )
        )
    return items


def parse_items(raw: RawCategory, category_key: str) -> list[ParsedMenuItem]:
    """Parse one category's items according to its entry mode."""
    if raw.item_entry_mode == "text":
        items = parse_text_items(raw.raw_text or "", category_key)
        if not items:
            logger.warning("Text category %r has no lines with a usable item name", raw.title or category_key)
        return items

    items = parse_structured_items(raw.items, category_key)
    if not items:
        logger.warning("Structured category %r has no named items", raw.title or category_key)
    return items
