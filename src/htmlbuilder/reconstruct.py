# src/htmlbuilder/reconstruct.py
"""
Rebuilds the nested structure of one block from its flat list of (node, depth) pairs.

The pending list is resolved deepest-first: the last node at the maximum depth is
attached under the nearest preceding node one level shallower (or under the block
root when there is none), then removed from the list. Nodes are prepended to their
parent, which restores top-to-bottom sibling order since they are resolved
bottom-to-top.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .core import ElementNode


@dataclass
class PendingNode:
    node: ElementNode
    depth: int


def _index_of_deepest(depths: Sequence[int], pending: Sequence[int]) -> int:
    """Position in `pending` of the last entry with the maximum depth."""
    max_depth = max(depths[i] for i in pending)
    if max_depth == 1:
        # Everything left hangs directly under the root: take the last one
        return len(pending) - 1

    last = 0
    for position, i in enumerate(pending):
        if depths[i] == max_depth:
            last = position
    return last


def _index_of_nearest_parent(depths: Sequence[int], pending: Sequence[int], deepest: int) -> Optional[int]:
    """Last entry before `deepest` that sits exactly one level above it, if any."""
    wanted = depths[pending[deepest]] - 1
    parent = None
    for position in range(deepest):
        if depths[pending[position]] == wanted:
            parent = pending[position]
    return parent


def attachment_plan(depths: Sequence[int]) -> List[Tuple[int, Optional[int]]]:
    """
    Computes the reattachment order for a block without touching any node.

    Args:
        depths: Depth of every non-root line of the block, in template order.

    Returns:
        List of (child index, parent index) in the order the attachments happen.
        A parent index of None means the block root.
    """
    pending = list(range(len(depths)))
    plan: List[Tuple[int, Optional[int]]] = []
    while pending:
        deepest = _index_of_deepest(depths, pending)
        parent = _index_of_nearest_parent(depths, pending, deepest)
        plan.append((pending[deepest], parent))
        del pending[deepest]
    return plan


def parent_links(depths: Sequence[int]) -> List[Optional[int]]:
    """Parent index of every entry (None for the block root)."""
    links: List[Optional[int]] = [None] * len(depths)
    for child, parent in attachment_plan(depths):
        links[child] = parent
    return links


def reconstruct(root: ElementNode, pending: Sequence[PendingNode]) -> ElementNode:
    """Attaches every pending node under its parent and returns the root."""
    nodes = [entry.node for entry in pending]
    for child, parent in attachment_plan([entry.depth for entry in pending]):
        target = root if parent is None else nodes[parent]
        target.prepend(nodes[child])
    return root
