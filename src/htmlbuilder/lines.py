# src/htmlbuilder/lines.py
"""
Indentation model of the template language.

A line's nesting depth is the number of consecutive marker characters at the
start of the (whitespace-trimmed) line. Lines at depth 0 are top-level lines;
each one opens a block that runs until the next top-level line.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_MARKER = ">"


@dataclass(frozen=True)
class Line:
    raw: str
    depth: int
    descriptor: str
    number: int  # 1-based position in the template, blank lines included


@dataclass
class Block:
    """A top-level line plus the nested lines that follow it."""
    root: Line
    children: List[Line]


def level(line: str, marker: str = DEFAULT_MARKER) -> int:
    """Counts the markers prefixing an already trimmed line."""
    depth = 0
    for char in line:
        if char != marker:
            break
        depth += 1
    return depth


def extract_lines(template: str, marker: str = DEFAULT_MARKER) -> List[Line]:
    """
    Splits a template into non-blank lines with their depth.

    Whitespace is trimmed first, then markers are counted and stripped. Any
    whitespace left between the markers and the descriptor is dropped too.
    """
    lines: List[Line] = []
    # Only "\n" ends a line; other separators are legal inside a content group
    for number, raw in enumerate(template.split("\n"), start=1):
        stripped = raw.strip()
        if not stripped:
            continue
        depth = level(stripped, marker)
        lines.append(Line(raw=stripped, depth=depth, descriptor=stripped[depth:].lstrip(), number=number))
    return lines


def split_blocks(lines: List[Line]) -> List[Block]:
    """
    Groups lines into blocks, one per top-level line, in template order.
    Nested lines appearing before the first top-level line belong to no block.
    """
    blocks: List[Block] = []
    orphans = 0
    for line in lines:
        if line.depth == 0:
            blocks.append(Block(root=line, children=[]))
        elif blocks:
            blocks[-1].children.append(line)
        else:
            orphans += 1

    if orphans:
        logger.warning("Skipping %d nested line(s) that precede the first top-level line.", orphans)
    return blocks
