"""Runtime configuration defaults for menu loading, navigation and logging."""

from __future__ import annotations

import os

MENU_PATH = "data/menu.json"
LOG_PATH = "/tmp/menuboard-debug.log"

_MENU_PATH_ENV = "MENUBOARD_MENU_PATH"
_LOG_PATH_ENV = "MENUBOARD_LOG_PATH"
_HEADER_OFFSET_ENV = "MENUBOARD_HEADER_OFFSET"

# Scroll orchestration: settle before the first attempt, then fixed retries.
SCROLL_SETTLE_DELAY_SECONDS = 0.08
SCROLL_RETRY_DELAY_SECONDS = 0.04
MAX_SCROLL_ATTEMPTS = 24
SCROLL_GAP_ROWS = 1
HEADER_OFFSET_ROWS = 0

# Tab strip geometry, in terminal cells.
TAB_GAP_CELLS = 1
COMPACT_BREAKPOINT_CELLS = 80


def resolve_menu_path(cli_path: str | None = None) -> str:
    """
    Resolve the menu JSON path.

    Resolution order:
    1. explicit command-line path
    2. MENUBOARD_MENU_PATH (if set)
    3. MENU_PATH
    """
    if cli_path and cli_path.strip():
        return cli_path.strip()
    env_override = os.environ.get(_MENU_PATH_ENV, "").strip()
    return env_override or MENU_PATH


def resolve_log_path() -> str:
    env_override = os.environ.get(_LOG_PATH_ENV, "").strip()
    return env_override or LOG_PATH


def resolve_header_offset() -> int:
    """Rows hidden behind fixed chrome above the menu body; read at scroll time."""
    raw = os.environ.get(_HEADER_OFFSET_ENV, "").strip()
    if not raw:
        return HEADER_OFFSET_ROWS
    try:
        return max(0, int(raw))
    except ValueError:
        return HEADER_OFFSET_ROWS
