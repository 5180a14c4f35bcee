"""Category picker modal: the compact-layout sheet and the "More" overflow list."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from menuboard.models import ParsedCategory
from menuboard.rendering import format_picker_rows


class CategoryPickerModal(ModalScreen[str | None]):
    """Centered list of categories; dismisses with the chosen slug or None."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "choose", "Go"),
    ]

    CSS = """
    CategoryPickerModal {
        align: center middle;
        background: $background 60%;
    }

    #picker-dialog {
        width: 48;
        height: auto;
        max-height: 80%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #picker-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #picker-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, title: str, categories: list[ParsedCategory], active_slug: str) -> None:
        super().__init__()
        self.picker_title = title
        self.rows = [(category.slug, category.title) for category in categories]
        self.active_slug = active_slug
        slugs = [slug for slug, _ in self.rows]
        if active_slug in slugs:
            self.cursor_index = slugs.index(active_slug)

    def compose(self) -> ComposeResult:
        with Container(id="picker-dialog"):
            yield Static(self.picker_title, id="picker-title")
            yield Static(id="picker-body")
            yield Static("J/K/↑/↓ move, Enter go, Esc/q close", id="picker-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        if not self.rows:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.rows)
        self._refresh_content()

    def action_choose(self) -> None:
        if not self.rows:
            self.dismiss(None)
            return
        slug, _ = self.rows[self.cursor_index]
        self.dismiss(slug)

    def _refresh_content(self) -> None:
        body = self.query_one("#picker-body", Static)
        if not self.rows:
            body.update(Text("(no categories)", style="dim"))
            return
        if self.cursor_index >= len(self.rows):
            self.cursor_index = len(self.rows) - 1
        body.update(format_picker_rows(self.rows, self.cursor_index, self.active_slug))
