"""Exceptions raised by the shrink tree algebra."""

from __future__ import annotations

from typing import Any


class TreeError(RuntimeError):
    """Base class for shrink tree programming errors."""


class InvalidForestError(TreeError, TypeError):
    """A forest function produced something that is not a Tree."""

    def __init__(self, parent_top: Any, item: Any, index: int):
        self.parent_top = parent_top
        self.item = item
        self.index = index
        super().__init__(
            f"Forest of node {parent_top!r} produced {type(item).__name__} at index {index}, expected Tree"
        )


class DistributionError(TreeError, TypeError):
    """A distribution combinator received a component that is not a Tree."""

    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value
        super().__init__(f"Component {key!r} is {type(value).__name__}, expected Tree")


__all__ = ["TreeError", "InvalidForestError", "DistributionError"]
