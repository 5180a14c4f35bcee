"""Rendering helpers for tabs, menu items and dietary badges."""

from __future__ import annotations

from rich.text import Text

from menuboard.models import MenuSection, ParsedMenuItem

_DIETARY_STYLES: dict[str, str] = {
    "VE": "bold #0b1f0f on #5fbf72",
    "V": "bold #0b1f0f on #9ad39f",
    "GF": "bold #ffffff on #2f6db5",
    "DF": "bold #ffffff on #6a4fb5",
}
_DEFAULT_BADGE_STYLE = "bold #ffffff on #b23a48"
PRICE_STYLE = "bold #e0b354"
ACTIVE_STYLE = "bold reverse"


def badge_style(tag: str) -> str:
    """Return a consistent badge style for a dietary tag."""
    return _DIETARY_STYLES.get(tag.upper(), _DEFAULT_BADGE_STYLE)


def format_dietary_tags(tags: tuple[str, ...]) -> Text:
    text = Text()
    for idx, tag in enumerate(tags):
        if idx > 0:
            text.append(" ")
        text.append(f" {tag} ", style=badge_style(tag))
    return text


def format_item(item: ParsedMenuItem) -> Text:
    """Render one item: name and price on the first line, then details."""
    text = Text()
    text.append(item.name, style="bold")
    if item.price:
        text.append("  ")
        text.append(item.price, style=PRICE_STYLE)
    if item.description:
        text.append("\n")
        text.append(item.description, style="dim")
    if item.dietary:
        text.append("\n")
        text.append_text(format_dietary_tags(item.dietary))
    return text


def format_tab_label(title: str, active: bool) -> Text:
    return Text(title, style=ACTIVE_STYLE if active else "")


def format_category_title(title: str, tagline: str | None) -> str:
    if not tagline:
        return title
    return f"{title} · {tagline}"


def format_section_heading(section: MenuSection) -> Text | None:
    """Render eyebrow, title and intro; None when the section has none."""
    parts = [
        (section.eyebrow, "dim"),
        (section.title, "bold"),
        (section.intro, "italic"),
    ]
    present = [(value.strip(), style) for value, style in parts if value and value.strip()]
    if not present:
        return None

    text = Text(justify="center" if section.heading_alignment == "center" else "left")
    for idx, (value, style) in enumerate(present):
        if idx > 0:
            text.append("\n")
        text.append(value.upper() if style == "dim" else value, style=style)
    return text


def format_picker_rows(rows: list[tuple[str, str]], cursor_index: int, active_slug: str) -> Text:
    """Render a pointer list of (slug, title) rows."""
    content = Text()
    for idx, (slug, title) in enumerate(rows):
        if idx > 0:
            content.append("\n")
        pointer = "➤ " if idx == cursor_index else "  "
        marker = "● " if slug == active_slug else "  "
        style = "bold white" if slug == active_slug else "white"
        content.append(f"{pointer}{marker}{title}", style=style)
    return content
