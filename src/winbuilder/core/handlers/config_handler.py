# src/winbuilder/core/handlers/config_handler.py
import json
import logging
from typing import List

from winbuilder.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)

config_help_text = """
  config list                Show the effective configuration as JSON.
  config get <key>           Show one value (e.g., builder.attribute_separator).
""".strip("\n")


def handle_config(args: List[str]) -> int:
    """Handles the 'config' command. Values can be overridden per run with --set KEY=VALUE."""
    if not args:
        print(config_help_text)
        return 1

    command = args[0]

    if command == "list":
        print(json.dumps(config_manager.get_all(), indent=2))
        return 0

    if command == "get":
        if len(args) != 2:
            print("Usage: config get <key>")
            return 1
        value = config_manager.get_nested(args[1])
        if value is None:
            print(f"❌ Unknown config key '{args[1]}'.")
            return 1
        print(json.dumps(value, indent=2))
        return 0

    print(f"Unknown command: 'config {command}'.")
    return 1
