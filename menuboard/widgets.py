"""Textual widgets for the menu tabs and accordion panels."""

from __future__ import annotations

from textual import events
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Collapsible, Static

from menuboard.models import ParsedCategory
from menuboard.rendering import format_category_title, format_item, format_tab_label


class CategoryTab(Static):
    """A focusable category tab; posts Selected when clicked or activated."""

    can_focus = True

    BINDINGS = [
        ("enter", "select", "Go to category"),
        ("space", "select", "Go to category"),
    ]

    class Selected(Message):
        def __init__(self, slug: str) -> None:
            super().__init__()
            self.slug = slug

    def __init__(self, category: ParsedCategory, classes: str | None = None) -> None:
        super().__init__(format_tab_label(category.title, False), classes=classes)
        self.category = category
        self.slug = category.slug

    def set_active(self, active: bool) -> None:
        self.set_class(active, "-active")
        self.update(format_tab_label(self.category.title, active))

    def focus_without_scroll(self) -> None:
        self.focus(scroll_visible=False)

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Selected(self.slug))

    def action_select(self) -> None:
        self.post_message(self.Selected(self.slug))


class NavButton(Static):
    """Small focusable control used for the sheet toggle and the "More" overflow."""

    can_focus = True

    BINDINGS = [
        ("enter", "press", "Open"),
        ("space", "press", "Open"),
    ]

    class Pressed(Message):
        def __init__(self, button: NavButton) -> None:
            super().__init__()
            self.button = button

    def __init__(self, label: str, id: str | None = None) -> None:
        super().__init__(label, id=id)
        self.label = label

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Pressed(self))

    def action_press(self) -> None:
        self.post_message(self.Pressed(self))


class CategoryPanel(Collapsible):
    """One accordion panel holding a category's items."""

    def __init__(self, category: ParsedCategory, collapsed: bool) -> None:
        body = Vertical(
            *[Static(format_item(item), classes="menu-item") for item in category.items],
            classes="category-body",
        )
        super().__init__(
            body,
            title=format_category_title(category.title, category.tagline),
            collapsed=collapsed,
        )
        self.category = category
        self.slug = category.slug
        self.body = body

    def is_laid_out(self) -> bool:
        return not self.collapsed and self.body.size.height > 0

    def scroll_top(self) -> int:
        return self.virtual_region.y

    def content_span(self) -> tuple[int, int] | None:
        """(top, height) in the menu body's scroll coordinates; None while collapsed."""
        if self.collapsed:
            return None
        region = self.virtual_region
        if region.height <= 0:
            return None
        return (region.y, region.height)

    def set_active(self, active: bool) -> None:
        self.set_class(active, "-active")
