"""Fair distribution of independent shrink trees into one tree of a compound value."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Sequence, TypeVar

from shrinktree.core.tree.errors import DistributionError
from shrinktree.core.tree.models import Tree

A = TypeVar("A")
K = TypeVar("K")


def dist(trees: Mapping[K, Tree[Any]]) -> Tree[Dict[K, Any]]:
    """
    Distribute a mapping of trees fairly into a tree of mappings.

    Each child of the result shrinks exactly one field and holds every other
    field at its current top. Children of all fields are siblings, grouped by
    the mapping's iteration order, so no field is exhausted before the next
    one gets a first attempt.

    Args:
        trees: Field name to tree of that field's values

    Returns:
        Tree whose tops are dicts with the same keys, in the same order

    Raises:
        DistributionError: If any value is not a Tree
    """
    fields = dict(trees)
    for key, value in fields.items():
        if not isinstance(value, Tree):
            raise DistributionError(key, value)
    return _dist(fields)


def _dist(fields: Dict[K, Tree[Any]]) -> Tree[Dict[K, Any]]:
    keys = list(fields)

    def shrink_one(key: K) -> Iterator[Tree[Dict[K, Any]]]:
        for child in fields[key].iter_forest():
            # Fresh mapping per child so earlier siblings stay valid
            replaced = dict(fields)
            replaced[key] = child
            yield _dist(replaced)

    def forest() -> Iterator[Tree[Dict[K, Any]]]:
        for key in keys:
            yield from shrink_one(key)

    return Tree({key: fields[key].top for key in keys}, forest)


def dist_array(trees: Sequence[Tree[A]]) -> Tree[List[A]]:
    """
    Distribute a fixed-length sequence of trees fairly into a tree of lists.

    Positions shrink independently; every node of the result holds a list of
    exactly ``len(trees)`` elements.

    Raises:
        DistributionError: If any element is not a Tree
    """
    length = len(trees)
    by_index = dist({index: tree for index, tree in enumerate(trees)})
    return by_index.map(lambda values: [values[index] for index in range(length)])


__all__ = ["dist", "dist_array"]
