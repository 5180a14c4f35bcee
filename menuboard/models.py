"""Domain models for menuboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

EntryMode = Literal["structured", "text"]
AccordionBehaviour = Literal["expanded", "first-open"]


@dataclass(frozen=True)
class RawItem:
    """One structured menu item as authored in the CMS."""

    key: str | None = None
    name: str | None = None
    price: str | None = None
    description: str | None = None
    dietary: list[str | None] | None = None


@dataclass(frozen=True)
class RawCategory:
    """One CMS category; either structured items or pasted text."""

    key: str | None = None
    title: str | None = None
    tagline: str | None = None
    item_entry_mode: str | None = None
    items: list[RawItem | None] | None = None
    raw_text: str | None = None


@dataclass(frozen=True)
class MenuSection:
    """A whole menu block with its heading copy and raw categories."""

    key: str = "menu"
    section_id: str | None = None
    eyebrow: str | None = None
    title: str | None = None
    intro: str | None = None
    accordion_behaviour: AccordionBehaviour = "expanded"
    heading_alignment: Literal["left", "center"] = "left"
    categories: list[RawCategory | None] = field(default_factory=list)


@dataclass(frozen=True)
class ParsedMenuItem:
    """A normalized menu item. `name` is never empty."""

    key: str
    name: str
    price: str | None = None
    description: str | None = None
    dietary: tuple[str, ...] = ()


@dataclass(frozen=True)
class ParsedCategory:
    """A normalized category with at least one item."""

    key: str
    slug: str
    title: str
    tagline: str | None
    items: tuple[ParsedMenuItem, ...]


@dataclass(frozen=True)
class NavState:
    """Navigation state shared by tabs, sheet, accordion and scroll tracking."""

    active_slug: str = ""
    open_slugs: frozenset[str] = frozenset()
    pending_scroll_slug: str | None = None


@dataclass(frozen=True)
class TabLayout:
    """How many tabs fit in the strip and whether the overflow control shows."""

    visible_count: int
    has_overflow: bool


@dataclass(frozen=True)
class IntersectionEntry:
    """Visibility of one category container inside the observation band."""

    slug: str
    is_intersecting: bool
    ratio: float
