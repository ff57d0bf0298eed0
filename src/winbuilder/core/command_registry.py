# src/winbuilder/core/command_registry.py
import logging
from typing import Callable, Dict, List

from winbuilder.core.handlers.compile_handler import compile_help_text, handle_compile
from winbuilder.core.handlers.config_handler import config_help_text, handle_config
from winbuilder.core.handlers.window_handler import handle_window, window_help_text

logger = logging.getLogger(__name__)

# The central registries.
CommandRegistry: Dict[str, Callable[[List[str]], int]] = {}
COMMAND_HELP_TEXTS: Dict[str, str] = {}


def register_command(name: str, handler: Callable[[List[str]], int], help_text: str = "") -> None:
    """Adds a command and its handler function to the registry."""
    CommandRegistry[name] = handler
    COMMAND_HELP_TEXTS[name] = help_text
    logger.debug("Registered command '%s'", name)


def register_all_commands() -> None:
    """Registers the built-in commands (idempotent)."""
    for name, handler, help_text in (
            ("compile", handle_compile, compile_help_text),
            ("window", handle_window, window_help_text),
            ("config", handle_config, config_help_text),
    ):
        if name not in CommandRegistry:
            register_command(name, handler, help_text)


def help_text() -> str:
    return "Commands:\n" + "\n".join(COMMAND_HELP_TEXTS[name] for name in sorted(COMMAND_HELP_TEXTS))
