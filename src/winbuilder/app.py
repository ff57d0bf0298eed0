from __future__ import annotations

import logging
import sys
from typing import List, Optional

from winbuilder.core.command_registry import CommandRegistry, help_text, register_all_commands
from winbuilder.core.managers.config_manager import config_manager
from winbuilder.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)


def _apply_overrides(argv: List[str]) -> Optional[List[str]]:
    """
    Consumes leading `--set KEY=VALUE` options and applies them to the configuration.
    Returns the remaining arguments, or None when an override is malformed.
    """
    rest = list(argv)
    while rest and rest[0] == "--set":
        if len(rest) < 2 or "=" not in rest[1]:
            print("Usage: winbuilder [--set KEY=VALUE]... <command> [args]")
            return None
        key, _, value = rest[1].partition("=")
        if not config_manager.set_nested(key.strip(), value):
            return None
        rest = rest[2:]
    return rest


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for the `winbuilder` command."""
    argv = sys.argv[1:] if argv is None else argv

    args = _apply_overrides(argv)
    if args is None:
        return 1

    configure_logger(
        config_manager.get_nested("debug.level", "WARNING"),
        module_specific_levels=config_manager.get_nested("debug.modules"),
        silenced_loggers=config_manager.get_nested("debug.silenced"),
    )
    register_all_commands()

    if not args or args[0] in ("-h", "--help", "help"):
        print(help_text())
        return 0 if args else 1

    command, command_args = args[0], args[1:]
    handler = CommandRegistry.get(command)
    if handler is None:
        print(f"Unknown command: '{command}'.\n{help_text()}")
        return 1

    logger.debug("Running '%s' with %s", command, command_args)
    return handler(command_args)


if __name__ == "__main__":
    sys.exit(main())
