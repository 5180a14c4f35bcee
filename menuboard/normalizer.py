"""Category normalization: titles, slugs, items and initial accordion state."""

from __future__ import annotations

import re
from typing import Sequence

from menuboard.models import ParsedCategory, RawCategory
from menuboard.parser import parse_items

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: str, fallback: str) -> str:
    """Build an anchor-safe slug, or return `fallback` when nothing survives."""
    slug = _NON_SLUG_RE.sub("-", text.lower()).strip("-")
    return slug or fallback


def normalize_categories(raw_categories: Sequence[RawCategory | None]) -> list[ParsedCategory]:
    """
    Turn raw CMS categories into parsed categories, in order.

    Categories that end up with no items are left out entirely. Slugs are
    not deduplicated: two categories with the same title share a slug and
    the later one wins navigation targeting.
    """
    categories: list[ParsedCategory] = []
    for index, raw in enumerate(raw_categories):
        if raw is None:
            continue

        title = (raw.title or "").strip() or f"Category {index + 1}"
        tagline = (raw.tagline or "").strip() or None
        key = raw.key or f"menu-category-{index}"
        slug = slugify(title, key)

        items = parse_items(raw, key)
        if not items:
            continue

        categories.append(ParsedCategory(key=key, slug=slug, title=title, tagline=tagline, items=tuple(items)))
    return categories


def initial_open_slugs(categories: Sequence[ParsedCategory], behaviour: str | None) -> frozenset[str]:
    """Resolve which accordion panels start open."""
    if not categories:
        return frozenset()
    if behaviour == "first-open":
        return frozenset({categories[0].slug})
    return frozenset(category.slug for category in categories)
