"""Leftmost-without-backtracking search over a shrink tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from shrinktree.core.tree.models import Tree

A = TypeVar("A")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult(Generic[A]):
    """Node reached by a search and the fuel left over."""

    tree: Tree[A]
    fuel: int
    depth: int = 0

    @property
    def top(self) -> A:
        return self.tree.top


def left_first_search(tree: Tree[A], p: Callable[[A], bool], fuel: int = -1) -> Optional[SearchResult[A]]:
    """
    Descend greedily into the first child whose top satisfies ``p``.

    There is no backtracking: once a child matches, its later siblings are
    never looked at. Each inspected child costs one unit of fuel, charged
    before the predicate runs, so the matching child is paid for too. The
    scan stops at the current node when fuel reaches zero. Negative fuel is
    unbounded and is returned unchanged.

    This is a heuristic. It favors speed and determinism over finding the
    smallest value that satisfies ``p``.

    Args:
        tree: Starting tree
        p: Predicate that candidates must keep satisfying
        fuel: Maximum number of children to inspect (-1 for no limit)

    Returns:
        SearchResult with the deepest node reached, or None if ``tree.top``
        does not satisfy ``p``
    """
    if not p(tree.top):
        logger.debug("Search start %r does not satisfy predicate", tree.top)
        return None

    current = tree
    depth = 0
    while True:
        match: Optional[Tree[A]] = None
        for child in current.iter_forest():
            if fuel == 0:
                break
            if fuel > 0:
                fuel -= 1
            if p(child.top):
                match = child
                break
        if match is None:
            break
        current = match
        depth += 1

    logger.debug("Search reached %r at depth %d (fuel left: %d)", current.top, depth, fuel)
    return SearchResult(tree=current, fuel=fuel, depth=depth)


__all__ = ["SearchResult", "left_first_search"]
