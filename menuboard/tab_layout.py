"""Fit category tabs into the strip and overflow the rest behind "More"."""

from __future__ import annotations

from typing import Sequence

from rich.cells import cell_len

from menuboard.models import TabLayout

TAB_PADDING = 2


def tab_width(label: str, padding: int = TAB_PADDING) -> int:
    """Natural width in cells of a tab rendering `label`."""
    return cell_len(label) + padding


def compute_fit(available_width: float, tab_widths: Sequence[float], gap: float) -> int:
    """Count how many tabs fit left to right, with `gap` between neighbours."""
    if available_width <= 0:
        return 0

    used = 0.0
    count = 0
    for width in tab_widths:
        spacing = 0 if count == 0 else gap
        if used + spacing + width > available_width:
            break
        used += spacing + width
        count += 1
    return count


def compute_visible_count(
    available_width: float,
    tab_widths: Sequence[float],
    overflow_control_width: float,
    gap: float,
) -> TabLayout:
    """Partition tabs between the visible strip and the overflow control."""
    total = len(tab_widths)
    if available_width <= 0:
        # Not laid out yet; show everything until there is a real width.
        return TabLayout(visible_count=total, has_overflow=False)

    fit = compute_fit(available_width, tab_widths, gap)
    if fit >= total:
        return TabLayout(visible_count=total, has_overflow=False)

    fit = compute_fit(max(available_width - overflow_control_width - gap, 0), tab_widths, gap)
    if total > 0 and fit == 0:
        fit = 1
    return TabLayout(visible_count=fit, has_overflow=fit < total)


class TabOverflowState:
    """Last computed layout; recompute reports whether anything changed."""

    def __init__(self, tab_count: int = 0) -> None:
        self.layout = TabLayout(visible_count=tab_count, has_overflow=False)

    def reset(self, tab_count: int) -> None:
        self.layout = TabLayout(visible_count=tab_count, has_overflow=False)

    def recompute(
        self,
        available_width: float,
        tab_widths: Sequence[float],
        overflow_control_width: float,
        gap: float,
    ) -> bool:
        layout = compute_visible_count(available_width, tab_widths, overflow_control_width, gap)
        if layout == self.layout:
            return False
        self.layout = layout
        return True
