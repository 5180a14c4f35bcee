import pytest

from menuboard.models import ParsedCategory, ParsedMenuItem


class FakeTimer:
    def __init__(self, scheduler, due, callback):
        self.scheduler = scheduler
        self.due = due
        self.callback = callback
        self.stopped = False

    def stop(self):
        self.stopped = True


class FakeScheduler:
    """Manual clock with Textual's `set_timer` shape."""

    def __init__(self):
        self.now = 0.0
        self.timers = []

    def set_timer(self, delay, callback):
        timer = FakeTimer(self, self.now + delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def live_timers(self):
        return [timer for timer in self.timers if not timer.stopped]

    def advance(self, seconds):
        """Fire due timers in order until `seconds` have elapsed."""
        end = self.now + seconds
        while True:
            due = [timer for timer in self.live_timers if timer.due <= end]
            if not due:
                break
            timer = min(due, key=lambda t: t.due)
            timer.stopped = True
            self.now = timer.due
            timer.callback()
        self.now = end

    def run_all(self, limit=1000):
        for _ in range(limit):
            if not self.live_timers:
                return
            self.advance(min(timer.due for timer in self.live_timers) - self.now)
        raise AssertionError("timers never settled")


class FakeTarget:
    def __init__(self, top, laid_out=True):
        self.top = top
        self.laid_out = laid_out

    def is_laid_out(self):
        return self.laid_out

    def scroll_top(self):
        return self.top


class FakeControl:
    def __init__(self):
        self.focus_calls = 0

    def focus_without_scroll(self):
        self.focus_calls += 1


def make_category(slug, title=None):
    return ParsedCategory(
        key=slug,
        slug=slug,
        title=title or slug.title(),
        tagline=None,
        items=(ParsedMenuItem(key=f"{slug}-0", name=f"{slug} item"),),
    )


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def categories():
    return [make_category(slug) for slug in ("starters", "mains", "desserts")]
