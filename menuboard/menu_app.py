"""Main Textual app class."""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal, HorizontalScroll, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Collapsible, Header, Static

from menuboard.category_picker_modal import CategoryPickerModal
from menuboard.config import COMPACT_BREAKPOINT_CELLS, TAB_GAP_CELLS, resolve_header_offset
from menuboard.models import MenuSection, NavState
from menuboard.navigation import NavController
from menuboard.normalizer import normalize_categories
from menuboard.rendering import format_section_heading
from menuboard.tab_layout import TabOverflowState, tab_width
from menuboard.tracker import ActiveCategoryTracker
from menuboard.widgets import CategoryPanel, CategoryTab, NavButton

logger = logging.getLogger(__name__)

_MORE_LABEL = "More ⋯"


class MenuApp(App):
    """A Textual app for browsing a menu by category."""

    TITLE = "Menu"

    CSS = """
    Screen {
        layout: vertical;
    }

    #menu-shell {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    #compact-nav, #wide-nav {
        height: 1;
        margin-bottom: 1;
    }

    #compact-tabs {
        width: 1fr;
        height: 1;
        scrollbar-size: 0 0;
    }

    #wide-tabs {
        width: 1fr;
        height: 1;
    }

    .category-tab {
        width: auto;
        height: 1;
        padding: 0 1;
        margin-right: 1;
        color: $text-muted;
    }

    .category-tab.-active {
        color: $text;
        text-style: bold;
    }

    .category-tab:focus {
        background: $boost;
    }

    NavButton {
        width: auto;
        height: 1;
        padding: 0 1;
        margin-right: 1;
        border: none;
        color: $secondary;
    }

    NavButton:focus {
        background: $boost;
    }

    #more-button {
        display: none;
    }

    #menu-body {
        height: 1fr;
    }

    #menu-heading {
        margin-bottom: 1;
    }

    CategoryPanel.-active > CollapsibleTitle {
        color: $accent;
        text-style: bold;
    }

    .menu-item {
        padding: 0 1;
        margin-bottom: 1;
    }

    #status-bar {
        height: 1;
        color: $text-muted;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("right", "step_category(1)", "Next category"),
        ("l", "step_category(1)", "Next category"),
        ("left", "step_category(-1)", "Previous category"),
        ("h", "step_category(-1)", "Previous category"),
        ("m", "open_sheet", "All categories"),
        ("o", "open_overflow", "More categories"),
        ("x", "toggle_active", "Open/close category"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, section: MenuSection) -> None:
        super().__init__()
        self.section = section
        self.title = section.title or self.TITLE
        self.sub_title = section.eyebrow or ""
        self.categories = normalize_categories(section.categories)

        self.nav = NavController(self, self._scroll_body_to, header_offset=resolve_header_offset)
        self.nav.set_categories(self.categories, section.accordion_behaviour)
        self.tracker = ActiveCategoryTracker()
        self.tab_overflow = TabOverflowState(len(self.categories))

        self.panels: list[CategoryPanel] = []
        self.wide_tabs: list[CategoryTab] = []
        self.compact_tabs: list[CategoryTab] = []
        self.compact = False
        self._has_revealed_tab = False
        logger.debug("app_init categories=%d", len(self.categories))

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="menu-shell"):
            with Horizontal(id="compact-nav"):
                yield NavButton(f"☰ {self.section.title or 'Menu'}", id="sheet-button")
                with HorizontalScroll(id="compact-tabs"):
                    for category in self.categories:
                        tab = CategoryTab(category, classes="category-tab")
                        self.compact_tabs.append(tab)
                        yield tab
            with Horizontal(id="wide-nav"):
                with Horizontal(id="wide-tabs"):
                    for category in self.categories:
                        tab = CategoryTab(category, classes="category-tab")
                        self.wide_tabs.append(tab)
                        yield tab
                yield NavButton(_MORE_LABEL, id="more-button")
            with VerticalScroll(id="menu-body"):
                heading = format_section_heading(self.section)
                if heading is not None:
                    yield Static(heading, id="menu-heading")
                if not self.categories:
                    yield Static("(no menu items yet)", id="menu-empty")
                for category in self.categories:
                    panel = CategoryPanel(category, collapsed=category.slug not in self.nav.state.open_slugs)
                    self.panels.append(panel)
                    yield panel
        yield Static("←/→ categories · M all categories · O more · X open/close · Ctrl+Q quit", id="status-bar")

    def on_mount(self) -> None:
        for panel in self.panels:
            self.nav.registry.register_target(panel.slug, panel)
        self.nav.subscribe(self._on_nav_change)
        self.tracker.observer.observe(self.nav.slugs)

        body = self.query_one("#menu-body", VerticalScroll)
        self.watch(body, "scroll_y", self._on_body_scroll, init=False)

        self._apply_active(self.nav.state.active_slug)
        self._apply_compact_mode()
        self.call_after_refresh(self._recompute_tabs)
        self.call_after_refresh(self._track_active)
        logger.debug("on_mount active=%r open=%d", self.nav.state.active_slug, len(self.nav.state.open_slugs))

    def on_unmount(self) -> None:
        self.nav.unmount()
        self.tracker.observer.disconnect()

    def on_resize(self, event: events.Resize) -> None:
        self._apply_compact_mode()
        self.call_after_refresh(self._recompute_tabs)
        self.call_after_refresh(self._track_active)

    def on_category_tab_selected(self, event: CategoryTab.Selected) -> None:
        event.stop()
        logger.debug("tab_selected slug=%r", event.slug)
        self.nav.request_scroll_to(event.slug)

    def on_nav_button_pressed(self, event: NavButton.Pressed) -> None:
        event.stop()
        if event.button.id == "sheet-button":
            self.action_open_sheet()
        elif event.button.id == "more-button":
            self.action_open_overflow()

    def on_collapsible_expanded(self, event: Collapsible.Expanded) -> None:
        self._on_panel_toggled(event.collapsible, True)

    def on_collapsible_collapsed(self, event: Collapsible.Collapsed) -> None:
        self._on_panel_toggled(event.collapsible, False)

    def action_step_category(self, delta: int) -> None:
        if isinstance(self.screen, CategoryPickerModal):
            return
        self.nav.step(delta)

    def action_toggle_active(self) -> None:
        if isinstance(self.screen, CategoryPickerModal):
            return
        slug = self.nav.state.active_slug
        if not slug:
            return
        self.nav.set_open(slug, slug not in self.nav.state.open_slugs, activate=True)

    def action_open_sheet(self) -> None:
        if isinstance(self.screen, CategoryPickerModal) or not self.categories:
            return
        modal = CategoryPickerModal(self.section.title or "Menu", self.categories, self.nav.state.active_slug)
        self.push_screen(modal, self._on_picker_choice)

    def action_open_overflow(self) -> None:
        if isinstance(self.screen, CategoryPickerModal):
            return
        layout = self.tab_overflow.layout
        if self.compact or not layout.has_overflow:
            return
        overflow = self.categories[layout.visible_count :]
        modal = CategoryPickerModal("More", overflow, self.nav.state.active_slug)
        self.push_screen(modal, self._on_picker_choice)

    def _on_picker_choice(self, slug: str | None) -> None:
        if slug is None:
            return
        logger.debug("picker_choice slug=%r", slug)
        self.nav.request_scroll_to(slug)

    def _on_panel_toggled(self, panel: Collapsible, is_open: bool) -> None:
        if not isinstance(panel, CategoryPanel):
            return
        if (panel.slug in self.nav.state.open_slugs) == is_open:
            # Echo of a state change this app applied itself.
            return
        self.nav.set_open(panel.slug, is_open, activate=True)

    def _on_nav_change(self, previous: NavState, current: NavState) -> None:
        if previous.open_slugs != current.open_slugs:
            for panel in self.panels:
                collapsed = panel.slug not in current.open_slugs
                if panel.collapsed != collapsed:
                    panel.collapsed = collapsed
            self.call_after_refresh(self._track_active)

        if previous.active_slug != current.active_slug:
            self._apply_active(current.active_slug)
            self._reveal_active_tab(current.active_slug)

        if previous.pending_scroll_slug and current.pending_scroll_slug is None:
            logger.debug("scroll_settled slug=%r", previous.pending_scroll_slug)

    def _on_body_scroll(self, scroll_y: float) -> None:
        self._track_active()

    def _scroll_body_to(self, top: int) -> None:
        try:
            body = self.query_one("#menu-body", VerticalScroll)
        except NoMatches:
            return
        body.scroll_to(y=top, animate=True)

    def _track_active(self) -> None:
        try:
            body = self.query_one("#menu-body", VerticalScroll)
        except NoMatches:
            return
        spans = {panel.slug: panel.content_span() for panel in self.panels}
        self.nav.track(self.tracker.update(spans, body.scroll_y, body.size.height))

    def _apply_active(self, slug: str) -> None:
        for tab in self.wide_tabs + self.compact_tabs:
            tab.set_active(tab.slug == slug)
        for panel in self.panels:
            panel.set_active(panel.slug == slug)

    def _reveal_active_tab(self, slug: str) -> None:
        """Keep the active tab visible inside the horizontally scrolling strip."""
        if not self._has_revealed_tab:
            # The first active slug is the initial one; leave the strip at its start.
            self._has_revealed_tab = True
            return
        if not self.compact:
            return
        try:
            strip = self.query_one("#compact-tabs", HorizontalScroll)
        except NoMatches:
            return
        for tab in self.compact_tabs:
            if tab.slug == slug:
                strip.scroll_to_widget(tab, animate=True)
                break

    def _apply_compact_mode(self) -> None:
        compact = self.size.width < COMPACT_BREAKPOINT_CELLS
        try:
            compact_nav = self.query_one("#compact-nav", Horizontal)
            wide_nav = self.query_one("#wide-nav", Horizontal)
        except NoMatches:
            return
        compact_nav.display = compact
        wide_nav.display = not compact
        if compact != self.compact:
            logger.debug("layout_mode compact=%s width=%d", compact, self.size.width)
        self.compact = compact
        self._register_controls()

    def _recompute_tabs(self) -> None:
        try:
            wide_nav = self.query_one("#wide-nav", Horizontal)
        except NoMatches:
            return
        widths = [tab_width(category.title) for category in self.categories]
        changed = self.tab_overflow.recompute(wide_nav.size.width, widths, tab_width(_MORE_LABEL), TAB_GAP_CELLS)
        if not changed:
            return
        layout = self.tab_overflow.layout
        logger.debug("tab_layout visible=%d overflow=%s", layout.visible_count, layout.has_overflow)
        for idx, tab in enumerate(self.wide_tabs):
            tab.display = idx < layout.visible_count
        self.query_one("#more-button", NavButton).display = layout.has_overflow
        self._register_controls()

    def _register_controls(self) -> None:
        """Point each slug at the tab that is on screen for the current layout."""
        visible_count = self.tab_overflow.layout.visible_count
        for idx, (wide, compact) in enumerate(zip(self.wide_tabs, self.compact_tabs)):
            self.nav.registry.unregister_control(wide.slug, wide)
            self.nav.registry.unregister_control(compact.slug, compact)
            if self.compact:
                self.nav.registry.register_control(compact.slug, compact)
            elif idx < visible_count:
                self.nav.registry.register_control(wide.slug, wide)
