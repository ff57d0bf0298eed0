# src/winbuilder/core/handlers/window_handler.py
import argparse
import logging
from pathlib import Path
from typing import List

from htmlbuilder import BuilderError, to_html
from windowkit import WindowStructure
from winbuilder.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

window_help_text = """
  window [--title T] [--width W] [--height H] [--body FILE] [--pretty]
                      Builds a window skeleton (menu bar + body) and prints its HTML.
                      The optional body template is nested inside the window body.
""".strip()


def handle_window(args: List[str]) -> int:
    """Builds a window and prints the generated HTML."""
    parser = argparse.ArgumentParser(prog="winbuilder window", description="Generate a window skeleton.")
    parser.add_argument("--title", default=config_manager.get_nested("window.title", "Window"))
    parser.add_argument("--width", type=int, default=config_manager.get_nested("window.width", 800))
    parser.add_argument("--height", type=int, default=config_manager.get_nested("window.height", 462))
    parser.add_argument("--body", type=Path, help="Template file for the window body.")
    parser.add_argument("--pretty", action="store_true")

    try:
        parsed = parser.parse_args(args)
    except SystemExit:
        return 1

    body = ""
    if parsed.body:
        if not parsed.body.is_file():
            print(f"❌ File not found: {parsed.body}")
            return 1
        body = parsed.body.read_text(encoding="utf-8")

    window = WindowStructure(
        title=parsed.title,
        width=parsed.width,
        height=parsed.height,
        min_width=config_manager.get_nested("window.min_width", 300),
        min_height=config_manager.get_nested("window.min_height", 100),
    )
    try:
        node = window.build(body)
    except BuilderError as e:
        logger.error("Could not build the window body: %s", e)
        print(f"❌ {e}")
        return 1

    print(to_html(node, pretty=parsed.pretty))
    return 0
