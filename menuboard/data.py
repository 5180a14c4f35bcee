"""Menu content loading: CMS block payloads into raw models."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from menuboard.constant import DEMO_MENU_SECTION
from menuboard.models import MenuSection, RawCategory, RawItem

logger = logging.getLogger(__name__)

_SECTION_ID_RE = re.compile(r"[a-z0-9-]+")


class MenuLoadError(ValueError):
    """The menu file could not be read as a menu block."""


def _text(value: Any) -> str | None:
    """Keep strings, turn everything else into None."""
    return value if isinstance(value, str) else None


def raw_item_from_payload(payload: Any) -> RawItem | None:
    if not isinstance(payload, dict):
        return None
    dietary = payload.get("dietary")
    return RawItem(
        key=_text(payload.get("_key")),
        name=_text(payload.get("name")),
        price=_text(payload.get("price")),
        description=_text(payload.get("description")),
        dietary=[_text(tag) for tag in dietary] if isinstance(dietary, list) else None,
    )


def raw_category_from_payload(payload: Any) -> RawCategory | None:
    if not isinstance(payload, dict):
        return None
    items = payload.get("items")
    return RawCategory(
        key=_text(payload.get("_key")),
        title=_text(payload.get("title")),
        tagline=_text(payload.get("tagline")),
        item_entry_mode=_text(payload.get("itemEntryMode")),
        items=[raw_item_from_payload(item) for item in items] if isinstance(items, list) else None,
        raw_text=_text(payload.get("rawItems")),
    )


def section_id_or_none(value: Any) -> str | None:
    """Accept only lowercase letters, numbers and hyphens as an anchor id."""
    section_id = _text(value)
    if not section_id:
        return None
    if not _SECTION_ID_RE.fullmatch(section_id):
        logger.warning("Ignoring section anchor %r: use lowercase letters, numbers and hyphens only", section_id)
        return None
    return section_id


def menu_section_from_payload(payload: dict[str, Any]) -> MenuSection:
    """Convert one exported menu block into a MenuSection."""
    categories = payload.get("categories")
    behaviour = "first-open" if payload.get("accordionBehaviour") == "first-open" else "expanded"
    alignment = "center" if payload.get("headingAlignment") == "center" else "left"
    return MenuSection(
        key=_text(payload.get("_key")) or "menu",
        section_id=section_id_or_none(payload.get("sectionId")),
        eyebrow=_text(payload.get("eyebrow")),
        title=_text(payload.get("title")),
        intro=_text(payload.get("intro")),
        accordion_behaviour=behaviour,
        heading_alignment=alignment,
        categories=[raw_category_from_payload(category) for category in categories]
        if isinstance(categories, list)
        else [],
    )


def demo_menu_section() -> MenuSection:
    return menu_section_from_payload(DEMO_MENU_SECTION)


def load_menu_section(path: str | Path) -> MenuSection:
    """
    Load a menu block from a JSON file.

    A missing file falls back to the demo menu. A file that is not valid
    JSON, or whose top level is not an object, raises MenuLoadError.
    """
    menu_file = Path(path)
    if not menu_file.is_file():
        logger.info("Menu file %s not found, using demo menu", menu_file)
        return demo_menu_section()

    try:
        payload = json.loads(menu_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise MenuLoadError(f"Could not read menu file {menu_file}: {exc}") from exc

    if not isinstance(payload, dict):
        raise MenuLoadError(f"Menu file {menu_file} must contain a JSON object")

    section = menu_section_from_payload(payload)
    logger.info("Loaded menu %r with %d categories from %s", section.key, len(section.categories), menu_file)
    return section
