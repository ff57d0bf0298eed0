# src/windowkit/window.py
from __future__ import annotations

import logging
import random
from enum import IntEnum
from typing import Callable, Optional

from htmlbuilder import ElementNode, HTMLBuilder

logger = logging.getLogger(__name__)


class WindowError(Exception):
    """Raised when a window operation is used in the wrong state."""


class WindowStatus(IntEnum):
    NORMAL = 0
    MINIMIZED = 1


def _noop() -> None:
    return None


class WindowStructure:
    """
    A window made of a menu bar (title + minify/extend/close buttons) and a body.

    The chrome is generated with an HTMLBuilder template whose root line carries a
    unique key as its id, so several windows can live in the same container.
    """

    def __init__(
            self,
            title: str = "Window",
            width: int = 800,
            height: int = 462,
            parent: Optional[ElementNode] = None,
            min_width: int = 300,
            min_height: int = 100,
    ):
        self.key = self._gen_key()
        self.title = title.strip()
        self.width = width
        self.height = height
        self.min_width = min_width
        self.min_height = min_height
        self.parent = parent if parent is not None else ElementNode.create("body")
        self.status = WindowStatus.NORMAL
        self.window: Optional[ElementNode] = None
        self.killed = False

        self.min_callback: Callable[[], None] = _noop
        self.extension_callback: Callable[[], None] = _noop
        self.close_callback: Callable[[], None] = _noop
        self.kill_callback: Callable[[], None] = _noop

        self.builder = HTMLBuilder()
        self.builder.register_event({"name": "minify", "type": "click", "callback": lambda e: self.minify()})
        self.builder.register_event({"name": "extend", "type": "click", "callback": lambda e: self.extend()})
        self.builder.register_event({"name": "close", "type": "click", "callback": lambda e: self.close()})

    @staticmethod
    def _gen_key() -> str:
        return "windowkey-" + "".join(str(random.randrange(10)) for _ in range(6))

    def _require_built(self) -> ElementNode:
        if self.window is None:
            raise WindowError("The window is not built.")
        if self.killed:
            raise WindowError("The window has been killed.")
        return self.window

    def _apply_title(self) -> None:
        # The title is node text, never template syntax
        titles = self.window.find_by_class("window-title")
        if not titles:
            raise WindowError("The window was not built correctly.")
        titles[0].text = self.title or None

    def _apply_size(self, width: int, height: int) -> None:
        window = self._require_built()
        window.style["width"] = f"{width}px"
        window.style["height"] = f"{height}px"

    # --- Construction ---

    def build(self, body_template: str = "") -> ElementNode:
        """
        Generates the window inside its parent.

        Args:
            body_template: A template for the window body; it is nested under `div.window-body`.
        """
        if self.window is not None:
            raise WindowError("The window is already built.")

        self.builder.set_container(self.parent)
        template = "\n".join([
            f"div.window#{self.key}",
            ">div.window-bar",
            ">>div.window-container-title",
            ">>>span.window-title",
            ">>div.window-main-buttons",
            ">>>button(&#150;)[type=button]@minify",
            ">>>button(&#8597;)[type=button; disabled]@extend",
            ">>>button(&times;)[type=button]@close",
            ">div.window-body",
        ])
        if body_template.strip():
            template += "\n" + self.builder.reindent(body_template, 2)

        self.builder.compile(template)
        self.window = self.parent.find_by_id(self.key)
        if self.window is None:
            raise WindowError("The window was not built correctly.")

        self._apply_title()
        self._apply_size(self.width, self.height)
        self.window.style["min-width"] = f"{self.min_width}px"
        self.window.style["min-height"] = f"{self.min_height}px"
        logger.debug("Built window '%s' (%s)", self.title, self.key)
        return self.window

    # --- State ---

    def minify(self) -> None:
        """Shrinks the window to its minimum size."""
        self._require_built()
        if self.status == WindowStatus.MINIMIZED:
            return
        self._apply_size(self.min_width, self.min_height)
        self.status = WindowStatus.MINIMIZED
        self.min_callback()

    def extend(self) -> None:
        """Restores the normal dimensions, only if the window is minimized."""
        self._require_built()
        if self.status != WindowStatus.MINIMIZED:
            return
        self._apply_size(self.width, self.height)
        self.status = WindowStatus.NORMAL
        self.extension_callback()

    def close(self) -> None:
        """Hides the window if it is not already closed."""
        window = self._require_built()
        if self.is_closed():
            return
        window.style["display"] = "none"
        self.close_callback()

    def reappear(self) -> None:
        """Makes a closed window visible again."""
        window = self._require_built()
        if self.is_closed():
            window.style["display"] = "block"

    def kill(self) -> None:
        """Removes the window from its parent. This action is irreversible."""
        window = self._require_built()
        self.builder.container.remove_child(window)
        self.killed = True
        self.kill_callback()

    def is_closed(self) -> bool:
        return self._require_built().style.get("display") == "none"

    # --- Callbacks ---

    def on_minify(self, callback: Callable[[], None]) -> None:
        self.min_callback = callback

    def on_extension(self, callback: Callable[[], None]) -> None:
        self.extension_callback = callback

    def on_close(self, callback: Callable[[], None]) -> None:
        self.close_callback = callback

    def on_kill(self, callback: Callable[[], None]) -> None:
        self.kill_callback = callback

    # --- Setters ---

    def set_parent(self, parent: ElementNode) -> None:
        self.parent = parent

    def set_title(self, title: str) -> None:
        """Sets the title shown in the menu bar."""
        self.title = title.strip()
        if self.window is not None:
            self._apply_title()

    def set_width(self, width: int) -> None:
        self.width = width
        if self.window is not None and self.status == WindowStatus.NORMAL:
            self.window.style["width"] = f"{width}px"

    def set_height(self, height: int) -> None:
        self.height = height
        if self.window is not None and self.status == WindowStatus.NORMAL:
            self.window.style["height"] = f"{height}px"

    def set_min_width(self, min_width: int) -> None:
        self.min_width = min_width

    def set_min_height(self, min_height: int) -> None:
        self.min_height = min_height
