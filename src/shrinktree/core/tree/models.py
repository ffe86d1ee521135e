"""
Shrink tree data models.

These models represent a generated value together with all of its shrinks:
- Tree: Lazy rose tree; the forest is recomputed on every access
- StrictTree: Finite, fully materialized snapshot of a Tree (inspection only)

Tree Structure:
    10
    ├── 0
    ├── 5
    │   ├── 0
    │   ├── 3
    │   └── 4
    ├── 8
    └── 9

Index 0 of a forest is always tried first. Every combinator keeps that order.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from pydantic import BaseModel, Field

from shrinktree.core.tree.errors import InvalidForestError

if TYPE_CHECKING:
    from shrinktree.core.tree.search import SearchResult

A = TypeVar("A")
B = TypeVar("B")
K = TypeVar("K")

ForestFn = Callable[[], Iterable["Tree[A]"]]


def _empty_forest() -> Tuple["Tree[Any]", ...]:
    return ()


class Tree(Generic[A]):
    """
    A value and a deferred, ordered forest of simpler candidates.

    The forest function is called on every access and its result is never
    stored, so trees built from self-referential combinators stay free of
    reference cycles.
    """

    __slots__ = ("_top", "_forest_fn")

    def __init__(self, top: A, forest: ForestFn = _empty_forest):
        self._top = top
        self._forest_fn = forest

    @property
    def top(self) -> A:
        return self._top

    def iter_forest(self) -> Iterator[Tree[A]]:
        """Yield the children in order without materializing the forest."""
        for index, child in enumerate(self._forest_fn()):
            if not isinstance(child, Tree):
                raise InvalidForestError(self._top, child, index)
            yield child

    def forest(self) -> List[Tree[A]]:
        """Compute the ordered list of child trees."""
        return list(self.iter_forest())

    def __repr__(self) -> str:
        return f"Tree(top={self._top!r})"

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def of(cls, a: A) -> Tree[A]:
        """Leaf tree: no shrinks."""
        return cls(a, _empty_forest)

    @classmethod
    def tree(cls, top: A, forest: ForestFn) -> Tree[A]:
        return cls(top, forest)

    @classmethod
    def tree_list(cls, top: A, forest: Iterable[Tree[A]]) -> Tree[A]:
        """Build a tree from an already materialized forest."""
        children = tuple(forest)
        return cls(top, lambda: children)

    # =========================================================================
    # Functor / Monad
    # =========================================================================

    def map(self, f: Callable[[A], B]) -> Tree[B]:
        return self.chain(lambda a: Tree.of(f(a)))

    def chain(self, f: Callable[[A], Tree[B]]) -> Tree[B]:
        """
        Monadic bind.

        The forest of the result lists the shrinks of this tree (re-expanded
        through ``f``) first, then the shrinks of ``f(self.top)``.
        """
        t = f(self._top)

        def forest() -> Iterator[Tree[B]]:
            for child in self.iter_forest():
                yield child.chain(f)
            yield from t.iter_forest()

        return Tree(t.top, forest)

    # =========================================================================
    # Pairing and distribution
    # =========================================================================

    def left_first_pair(self, tb: Tree[B]) -> Tree[Tuple[A, B]]:
        """Pair two trees, exhausting this tree's shrinks before ``tb``'s."""
        return self.chain(lambda a: tb.chain(lambda b: Tree.of((a, b))))

    def fair_pair(self, tb: Tree[B]) -> Tree[Tuple[A, B]]:
        """Pair two trees so that both sides shrink at every level."""
        return Tree.dist({"a": self, "b": tb}).map(lambda p: (p["a"], p["b"]))

    @staticmethod
    def dist(trees: Mapping[K, Tree[Any]]) -> Tree[Dict[K, Any]]:
        from shrinktree.core.tree.distribution import dist

        return dist(trees)

    @staticmethod
    def dist_array(trees: Sequence[Tree[A]]) -> Tree[List[A]]:
        from shrinktree.core.tree.distribution import dist_array

        return dist_array(trees)

    # =========================================================================
    # Search and inspection
    # =========================================================================

    def left_first_search(self, p: Callable[[A], bool], fuel: int = -1) -> Optional[SearchResult[A]]:
        """
        Greedy leftmost descent used for shrinking.

        Returns the deepest node reached by always moving into the first child
        that satisfies ``p``, or None when this tree's top does not satisfy it.
        """
        from shrinktree.core.tree.search import left_first_search

        return left_first_search(self, p, fuel)

    def force(self, depth: int = -1) -> StrictTree:
        """Materialize the tree down to ``depth`` levels (negative means all)."""
        if depth == 0:
            return StrictTree(top=self._top)
        return StrictTree(top=self._top, forest=[child.force(depth - 1) for child in self.iter_forest()])


class StrictTree(BaseModel):
    """
    Finite snapshot of a Tree.

    Produced by ``Tree.force`` for display and debugging; it takes no part in
    the shrinking algebra.
    """

    top: Any
    forest: List[StrictTree] = Field(default_factory=list)

    def size(self) -> int:
        """Number of nodes, root included."""
        return 1 + sum(child.size() for child in self.forest)

    def height(self) -> int:
        """Number of levels below the root."""
        if not self.forest:
            return 0
        return 1 + max(child.height() for child in self.forest)

    def tops(self) -> List[Any]:
        """Tops in pre-order."""
        result = [self.top]
        for child in self.forest:
            result.extend(child.tops())
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain nested data (tuples become lists)."""
        return {
            "top": _plain(self.top),
            "forest": [child.to_dict() for child in self.forest],
        }


def _plain(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return repr(value)


StrictTree.model_rebuild()

__all__ = ["Tree", "StrictTree"]
