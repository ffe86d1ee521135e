"""
Shrink tree module.

Provides the lazy rose tree that pairs a generated value with all of its
shrinks, the combinators that compose such trees, and the search used to
minimize counterexamples.

Components:
- Tree: Lazy value + forest of simpler candidates
- StrictTree: Finite snapshot of a Tree for inspection
- dist / dist_array: Fair composition of independent trees
- left_first_search / SearchResult: Greedy leftmost descent with a fuel budget
- unfold / int_tree / sequence_tree: Build trees from shrink functions

Example:
    from shrinktree.core.tree import Tree, int_tree

    pair = int_tree(10).fair_pair(int_tree(3))
    result = pair.left_first_search(lambda p: p[0] + p[1] >= 7, fuel=100)
    if result is not None:
        print(result.top, result.fuel)
"""

from shrinktree.core.tree.distribution import dist, dist_array
from shrinktree.core.tree.errors import DistributionError, InvalidForestError, TreeError
from shrinktree.core.tree.models import StrictTree, Tree
from shrinktree.core.tree.search import SearchResult, left_first_search
from shrinktree.core.tree.shrinks import (
    int_tree,
    sequence_tree,
    shrink_int,
    shrink_sequence,
    unfold,
)

__all__ = [
    "Tree",
    "StrictTree",
    "SearchResult",
    "dist",
    "dist_array",
    "left_first_search",
    "unfold",
    "shrink_int",
    "shrink_sequence",
    "int_tree",
    "sequence_tree",
    "TreeError",
    "InvalidForestError",
    "DistributionError",
]
