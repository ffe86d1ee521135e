"""Shrink functions and the ``unfold`` constructor that turns them into lazy trees."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Sequence, TypeVar

from shrinktree.core.tree.models import Tree

A = TypeVar("A")
S = TypeVar("S", bound=Sequence)

Shrink = Callable[[A], Iterable[A]]


def unfold(value: A, shrink: Shrink[A]) -> Tree[A]:
    """
    Build the full shrink tree of ``value``.

    Children are ``unfold(v, shrink)`` for every ``v`` in ``shrink(value)``,
    created only when the forest is requested.
    """
    return Tree(value, lambda: (unfold(v, shrink) for v in shrink(value)))


def halves(n: int) -> Iterator[int]:
    """Yield n, n // 2, n // 4, ... down to (but excluding) zero, keeping the sign."""
    while n != 0:
        yield n
        n = n // 2 if n > 0 else -(-n // 2)


def shrink_int(value: int, target: int = 0) -> Iterator[int]:
    """
    Shrink an integer towards ``target``.

    Yields ``target`` first, then candidates that move back towards
    ``value`` by halving the remaining distance:

        shrink_int(10) -> 0, 5, 8, 9
        shrink_int(3)  -> 0, 2
    """
    for distance in halves(value - target):
        yield value - distance


def shrink_sequence(seq: S) -> Iterator[S]:
    """
    Shrink a sequence by removing elements.

    Yields the empty sequence first, then every sequence with one element
    removed, left to right. The result keeps the input's type.
    """
    if len(seq) == 0:
        return
    yield seq[:0]
    if len(seq) == 1:
        return
    for index in range(len(seq)):
        yield seq[:index] + seq[index + 1 :]


def int_tree(value: int, target: int = 0) -> Tree[int]:
    return unfold(value, lambda v: shrink_int(v, target))


def sequence_tree(seq: S) -> Tree[S]:
    return unfold(seq, shrink_sequence)


__all__ = [
    "Shrink",
    "unfold",
    "halves",
    "shrink_int",
    "shrink_sequence",
    "int_tree",
    "sequence_tree",
]
