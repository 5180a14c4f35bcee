"""Active-category tracking from scroll position."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from menuboard.models import IntersectionEntry

Span = tuple[int, int]

DEFAULT_ROOT_MARGIN = 0.4
DEFAULT_THRESHOLDS = (0.25, 0.5, 0.75)


def observation_band(viewport_top: float, viewport_height: float, root_margin: float = DEFAULT_ROOT_MARGIN) -> tuple[float, float]:
    """Return the (top, bottom) band left after trimming `root_margin` off each edge."""
    inset = viewport_height * root_margin
    return (viewport_top + inset, viewport_top + viewport_height - inset)


def intersection_ratio(top: float, height: float, band: tuple[float, float]) -> float:
    """Fraction of a target span that lies inside the band."""
    if height <= 0:
        return 0.0
    overlap = min(top + height, band[1]) - max(top, band[0])
    if overlap <= 0:
        return 0.0
    return min(1.0, overlap / height)


class IntersectionObserver:
    """
    Threshold-crossing visibility reports for category containers.

    `update` takes the current container spans (top, height) in scroll
    content coordinates and returns only the entries whose intersecting
    flag or threshold bucket changed since the previous call.
    """

    def __init__(self, thresholds: Sequence[float] = DEFAULT_THRESHOLDS, root_margin: float = DEFAULT_ROOT_MARGIN) -> None:
        self.thresholds = tuple(sorted(thresholds))
        self.root_margin = root_margin
        self._slugs: list[str] = []
        self._buckets: dict[str, tuple[bool, int]] = {}
        self.entries: dict[str, IntersectionEntry] = {}

    def observe(self, slugs: Iterable[str]) -> None:
        """Replace the observed set; the next update reports every target."""
        self._slugs = list(dict.fromkeys(slugs))
        self._buckets.clear()
        self.entries.clear()

    def disconnect(self) -> None:
        self.observe([])

    @property
    def slugs(self) -> list[str]:
        return list(self._slugs)

    def _bucket(self, ratio: float) -> int:
        return sum(1 for threshold in self.thresholds if ratio >= threshold)

    def update(
        self,
        spans: Mapping[str, Span | None],
        viewport_top: float,
        viewport_height: float,
    ) -> list[IntersectionEntry]:
        band = observation_band(viewport_top, viewport_height, self.root_margin)
        batch: list[IntersectionEntry] = []
        for slug in self._slugs:
            span = spans.get(slug)
            if span is None:
                ratio = 0.0
                intersecting = False
            else:
                top, height = span
                ratio = intersection_ratio(top, height, band)
                intersecting = ratio > 0

            entry = IntersectionEntry(slug=slug, is_intersecting=intersecting, ratio=ratio)
            self.entries[slug] = entry

            bucket = (intersecting, self._bucket(ratio))
            if self._buckets.get(slug) != bucket:
                self._buckets[slug] = bucket
                batch.append(entry)
        return batch

    def intersecting(self) -> list[IntersectionEntry]:
        """Entries currently intersecting, in observation order."""
        return [self.entries[slug] for slug in self._slugs if slug in self.entries and self.entries[slug].is_intersecting]


class ActiveCategoryTracker:
    """Pick the most visible category whenever the observer reports a change."""

    def __init__(self, observer: IntersectionObserver | None = None) -> None:
        self.observer = observer or IntersectionObserver()

    def handle(self, batch: Sequence[IntersectionEntry]) -> str | None:
        """Return the new active slug, or None to keep the current one."""
        if not batch:
            return None
        return pick_active(self.observer.intersecting())

    def update(self, spans: Mapping[str, Span | None], viewport_top: float, viewport_height: float) -> str | None:
        return self.handle(self.observer.update(spans, viewport_top, viewport_height))


def pick_active(entries: Sequence[IntersectionEntry]) -> str | None:
    """Highest ratio among intersecting entries; the earliest wins ties."""
    best: IntersectionEntry | None = None
    for entry in entries:
        if not entry.is_intersecting:
            continue
        if best is None or entry.ratio > best.ratio:
            best = entry
    return best.slug if best is not None else None
