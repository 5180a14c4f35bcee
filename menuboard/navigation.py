"""Navigation state, target registry and scroll orchestration."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Protocol, Sequence

from menuboard.config import (
    MAX_SCROLL_ATTEMPTS,
    SCROLL_GAP_ROWS,
    SCROLL_RETRY_DELAY_SECONDS,
    SCROLL_SETTLE_DELAY_SECONDS,
)
from menuboard.models import NavState, ParsedCategory
from menuboard.normalizer import initial_open_slugs

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def stop(self) -> None: ...


class Scheduler(Protocol):
    """Anything with Textual's `set_timer` shape."""

    def set_timer(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class ScrollTarget(Protocol):
    """A category content container that can be scrolled to."""

    def is_laid_out(self) -> bool: ...

    def scroll_top(self) -> int: ...


class NavControl(Protocol):
    """A tab or sheet entry that takes focus after a scroll."""

    def focus_without_scroll(self) -> None: ...


StateListener = Callable[[NavState, NavState], None]


class TargetRegistry:
    """Slug-keyed scroll targets and navigation controls."""

    def __init__(self) -> None:
        self._targets: dict[str, ScrollTarget] = {}
        self._controls: dict[str, NavControl] = {}

    def register_target(self, slug: str, target: ScrollTarget) -> None:
        self._targets[slug] = target

    def unregister_target(self, slug: str, target: ScrollTarget | None = None) -> None:
        # A later registration for the same slug must survive an older widget's unmount.
        if target is None or self._targets.get(slug) is target:
            self._targets.pop(slug, None)

    def target(self, slug: str) -> ScrollTarget | None:
        return self._targets.get(slug)

    def register_control(self, slug: str, control: NavControl) -> None:
        self._controls[slug] = control

    def unregister_control(self, slug: str, control: NavControl | None = None) -> None:
        if control is None or self._controls.get(slug) is control:
            self._controls.pop(slug, None)

    def control(self, slug: str) -> NavControl | None:
        return self._controls.get(slug)

    def clear(self) -> None:
        self._targets.clear()
        self._controls.clear()


class RetryChain:
    """Token for one scroll request; cancelling it invalidates its pending timer."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        self.attempt = 0
        self.cancelled = False
        self._timer: TimerHandle | None = None

    def schedule(self, scheduler: Scheduler, delay: float, callback: Callable[[], None]) -> None:
        if self.cancelled:
            return
        self._timer = scheduler.set_timer(delay, callback)

    def cancel(self) -> None:
        self.cancelled = True
        if self._timer is not None:
            self._timer.stop()
            self._timer = None


class NavController:
    """
    Owns the active category, the open accordion panels and scroll requests.

    Tab clicks, scroll tracking and finished scrolls all write through
    `_commit`, so the active slug and the open set always change together
    and the last write wins. At most one retry chain is alive at a time.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        scroll_to: Callable[[int], None],
        *,
        header_offset: Callable[[], int] = lambda: 0,
        settle_delay: float = SCROLL_SETTLE_DELAY_SECONDS,
        retry_delay: float = SCROLL_RETRY_DELAY_SECONDS,
        max_attempts: int = MAX_SCROLL_ATTEMPTS,
        gap: int = SCROLL_GAP_ROWS,
    ) -> None:
        self.scheduler = scheduler
        self.scroll_to = scroll_to
        self.header_offset = header_offset
        self.settle_delay = settle_delay
        self.retry_delay = retry_delay
        self.max_attempts = max_attempts
        self.gap = gap
        self.categories: list[ParsedCategory] = []
        self.state = NavState()
        self.registry = TargetRegistry()
        self._listeners: list[StateListener] = []
        self._chain: RetryChain | None = None

    @property
    def slugs(self) -> list[str]:
        return [category.slug for category in self.categories]

    @property
    def scroll_in_flight(self) -> bool:
        return self._chain is not None

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def set_categories(self, categories: Sequence[ParsedCategory], behaviour: str | None = None) -> None:
        """Reset navigation for a new category list."""
        self._cancel_chain()
        self.categories = list(categories)
        first = self.categories[0].slug if self.categories else ""
        self._commit(
            active_slug=first,
            open_slugs=initial_open_slugs(self.categories, behaviour),
            pending_scroll_slug=None,
        )

    def select(self, slug: str) -> None:
        """Make `slug` active without scrolling (accordion title activation); opens it if closed."""
        if slug not in self.slugs:
            return
        self._commit(active_slug=slug, open_slugs=self.state.open_slugs | {slug})

    def set_open(self, slug: str, is_open: bool, *, activate: bool = False) -> None:
        """
        Open or close one accordion panel.

        Opening with `activate` also makes the panel active. Closing the
        active panel hands the active slug to the nearest open panel in the
        same write; it stays put only when nothing is left open.
        """
        if slug not in self.slugs:
            return

        if is_open:
            open_slugs = self.state.open_slugs | {slug}
            if activate:
                self._commit(open_slugs=open_slugs, active_slug=slug)
            else:
                self._commit(open_slugs=open_slugs)
            return

        open_slugs = self.state.open_slugs - {slug}
        active_slug = self.state.active_slug
        if active_slug not in open_slugs:
            active_slug = self._nearest_open(active_slug, open_slugs) or active_slug
        self._commit(open_slugs=open_slugs, active_slug=active_slug)

    def track(self, slug: str | None) -> None:
        """Apply an active-category tracker result; None and closed slugs keep the current one."""
        if slug is None or slug not in self.state.open_slugs:
            return
        self._commit(active_slug=slug)

    def step(self, delta: int) -> None:
        """Scroll to the category `delta` positions from the active one."""
        slugs = self.slugs
        if not slugs:
            return
        try:
            index = slugs.index(self.state.active_slug)
        except ValueError:
            index = 0
        self.request_scroll_to(slugs[(index + delta) % len(slugs)])

    def request_scroll_to(self, slug: str) -> None:
        """Open the category, then scroll it into view once it is laid out."""
        if slug not in self.slugs:
            logger.debug("scroll request ignored for unknown slug %r", slug)
            return

        self._cancel_chain(clear_pending=False)
        self._commit(
            active_slug=slug,
            open_slugs=self.state.open_slugs | {slug},
            pending_scroll_slug=slug,
        )
        chain = RetryChain(slug)
        self._chain = chain
        chain.schedule(self.scheduler, self.settle_delay, lambda: self._attempt(chain))

    def unmount(self) -> None:
        self._cancel_chain()
        self.registry.clear()

    def _attempt(self, chain: RetryChain) -> None:
        if chain.cancelled or chain is not self._chain:
            return

        target = self.registry.target(chain.slug)
        if target is None or not target.is_laid_out():
            if chain.attempt < self.max_attempts:
                chain.attempt += 1
                chain.schedule(self.scheduler, self.retry_delay, lambda: self._attempt(chain))
                return
            logger.debug("scroll to %r abandoned after %d attempts", chain.slug, chain.attempt + 1)
            self._finish(chain)
            return

        top = target.scroll_top() - self.header_offset() - self.gap
        self.scroll_to(max(0, top))

        control = self.registry.control(chain.slug)
        if control is not None:
            control.focus_without_scroll()
        self._finish(chain)

    def _nearest_open(self, slug: str, open_slugs: frozenset[str]) -> str | None:
        """Closest open slug to `slug` in category order, preferring the one below."""
        slugs = self.slugs
        if slug not in slugs:
            return next((candidate for candidate in slugs if candidate in open_slugs), None)
        index = slugs.index(slug)
        for distance in range(1, len(slugs)):
            for candidate in (index + distance, index - distance):
                if 0 <= candidate < len(slugs) and slugs[candidate] in open_slugs:
                    return slugs[candidate]
        return None

    def _finish(self, chain: RetryChain) -> None:
        chain.cancel()
        if self._chain is chain:
            self._chain = None
        if self.state.pending_scroll_slug == chain.slug:
            self._commit(pending_scroll_slug=None)

    def _cancel_chain(self, clear_pending: bool = True) -> None:
        chain = self._chain
        self._chain = None
        if chain is not None:
            chain.cancel()
        if clear_pending and self.state.pending_scroll_slug is not None:
            self._commit(pending_scroll_slug=None)

    def _commit(self, **changes: object) -> bool:
        current = replace(self.state, **changes)
        if current == self.state:
            return False
        previous, self.state = self.state, current
        for listener in list(self._listeners):
            listener(previous, current)
        return True
