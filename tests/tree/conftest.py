"""
Shared fixtures for shrink tree tests.
"""

from typing import Callable, List

import pytest

from shrinktree.core.tree import StrictTree, Tree


def _infinite_tree(top: int, branching: int) -> Tree[int]:
    return Tree(top, lambda: [_infinite_tree(top + 1, branching) for _ in range(branching)])


def _all_nodes(strict: StrictTree) -> List[StrictTree]:
    nodes = [strict]
    for child in strict.forest:
        nodes.extend(_all_nodes(child))
    return nodes


@pytest.fixture
def infinite_tree() -> Callable[[int, int], Tree[int]]:
    """Factory: every node has ``branching`` children, each one greater than its parent."""
    return _infinite_tree


@pytest.fixture
def all_nodes() -> Callable[[StrictTree], List[StrictTree]]:
    """Every node of a snapshot in pre-order."""
    return _all_nodes


@pytest.fixture
def three_tree() -> Tree[int]:
    """Tree for 3 with children 0, 1, 2."""
    return Tree.tree_list(3, [Tree.of(0), Tree.of(1), Tree.of(2)])


@pytest.fixture
def ab_tree() -> Tree[str]:
    """Tree for "ab" with children "a" and ""."""
    return Tree.tree_list("ab", [Tree.of("a"), Tree.of("")])


@pytest.fixture
def counting_forest() -> Callable[..., Callable[[], List[Tree[int]]]]:
    """Factory for forest functions that record how often they are called."""

    def factory(calls: List[int], *tops: int) -> Callable[[], List[Tree[int]]]:
        def forest() -> List[Tree[int]]:
            calls.append(1)
            return [Tree.of(top) for top in tops]

        return forest

    return factory
