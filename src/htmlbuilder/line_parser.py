# src/htmlbuilder/line_parser.py
from __future__ import annotations

import html
import logging
import re
from typing import List, Optional, Tuple

from .core import NodeDescriptor
from .errors import MalformedLineError

logger = logging.getLogger(__name__)

DEFAULT_ATTRIBUTE_SEPARATOR = ";"
EVENT_SEPARATOR = ";"

# Token patterns, all matched at the current cursor position.
_TAG_PATTERN = re.compile(r"\w+")
_NAME_PATTERN = re.compile(r"[\w-]*")
_EVENTS_PATTERN = re.compile(r"[\w;]*")


class LineParser:
    """
    Recursive-descent parser for a single template line (markers already stripped).

    Grammar, every group optional except the tag and always in this order:
        tag (.class)* (#id)? ((content))? ([attr;attr=value])? (@event;event)?

    Only a missing tag is fatal. Malformed class, attribute and event tokens are
    dropped with a diagnostic and parsing continues.
    """

    def __init__(self, attribute_separator: str = DEFAULT_ATTRIBUTE_SEPARATOR):
        self.attribute_separator = attribute_separator

    def parse(self, line: str) -> NodeDescriptor:
        """
        Parses a descriptor into a NodeDescriptor.

        Raises:
            MalformedLineError: If the line does not start with a tag name.
        """
        self._line = line
        self._pos = 0
        self._diagnostics: List[str] = []

        tag = self._match(_TAG_PATTERN)
        if not tag:
            raise MalformedLineError(line)

        descriptor = NodeDescriptor(
            tag=tag,
            classes=self._parse_classes(),
            id=self._parse_id(),
            text=self._parse_content(),
            attributes=self._parse_attributes(),
            event_names=self._parse_events(),
        )

        rest = line[self._pos:].strip()
        if rest:
            logger.debug("HTMLBuilder: ignoring trailing text %r in line %r", rest, line)
        descriptor.diagnostics = self._diagnostics
        return descriptor

    # --- Cursor helpers ---

    def _peek(self) -> str:
        return self._line[self._pos] if self._pos < len(self._line) else ""

    def _match(self, pattern: re.Pattern) -> str:
        match = pattern.match(self._line, self._pos)
        if not match:
            return ""
        self._pos = match.end()
        return match.group(0)

    def _report(self, message: str) -> None:
        logger.warning("HTMLBuilder: %s in line %r", message, self._line)
        self._diagnostics.append(message)

    # --- Groups ---

    def _parse_classes(self) -> List[str]:
        classes: List[str] = []
        while self._peek() == ".":
            self._pos += 1
            token = self._match(_NAME_PATTERN)
            if not token:
                continue
            if token[0].isdigit():
                self._report(f"invalid syntax for class name '{token}'")
                continue
            classes.append(token)
        return classes

    def _parse_id(self) -> Optional[str]:
        if self._peek() != "#":
            return None
        self._pos += 1
        return self._match(_NAME_PATTERN) or None

    def _parse_content(self) -> Optional[str]:
        if self._peek() != "(":
            return None

        depth = 0
        for i in range(self._pos, len(self._line)):
            char = self._line[i]
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth == 0:
                    raw = self._line[self._pos + 1:i]
                    self._pos = i + 1
                    return html.unescape(raw) if raw else None

        self._report("unterminated content group")
        self._pos = len(self._line)
        return None

    def _parse_attributes(self) -> List[Tuple[str, Optional[str]]]:
        if self._peek() != "[":
            return []

        end = self._line.rfind("]")
        if end < self._pos:
            self._report("unterminated attribute group")
            self._pos = len(self._line)
            return []

        body = self._line[self._pos + 1:end]
        self._pos = end + 1

        attributes: List[Tuple[str, Optional[str]]] = []
        for item in body.split(self.attribute_separator):
            item = item.strip()
            if not item:
                continue
            if item[0].isdigit():
                self._report(f"invalid syntax for attribute name '{item}'")
                continue
            if "=" in item:
                name, _, value = item.partition("=")
                if not name.strip():
                    self._report(f"missing attribute name in '{item}'")
                    continue
                attributes.append((name.strip(), value.strip()))
            else:
                attributes.append((item, None))
        return attributes

    def _parse_events(self) -> List[str]:
        if self._peek() != "@":
            return []
        self._pos += 1

        names: List[str] = []
        for name in self._match(_EVENTS_PATTERN).split(EVENT_SEPARATOR):
            if not name:
                continue
            if name[0].isdigit():
                self._report(f"invalid syntax for event name '{name}'")
                continue
            names.append(name)
        return names
