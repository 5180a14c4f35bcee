"""Entry point for the menuboard Textual app."""

from __future__ import annotations

import argparse
import logging

from menuboard.config import resolve_menu_path
from menuboard.data import MenuLoadError, load_menu_section
from menuboard.logging_config import setup_logging
from menuboard.menu_app import MenuApp

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="menuboard", description="Browse a restaurant menu by category.")
    parser.add_argument(
        "menu",
        nargs="?",
        help="path to an exported menu block (JSON); defaults to MENUBOARD_MENU_PATH or data/menu.json",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the Textual application."""
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        section = load_menu_section(resolve_menu_path(args.menu))
    except MenuLoadError as exc:
        logger.error("%s", exc)
        raise SystemExit(str(exc)) from exc

    MenuApp(section).run()


if __name__ == "__main__":
    main()
