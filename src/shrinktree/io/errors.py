"""Errors raised while reading or writing tree snapshots."""

from __future__ import annotations

from typing import List, Sequence, Union

from pydantic import ValidationError

Loc = Sequence[Union[str, int]]


def describe_node(loc: Loc) -> str:
    """
    Turn a pydantic error location inside a StrictTree into a node path.

    ("forest", 0, "forest", 2, "top") -> "root/0/2 top"
    ("forest",)                       -> "root forest"
    """
    nodes = ["root"]
    field = ""
    parts = list(loc)
    while parts:
        part = parts.pop(0)
        if part == "forest" and parts and isinstance(parts[0], int):
            nodes.append(str(parts.pop(0)))
        else:
            field = ".".join(str(p) for p in [part, *parts])
            break
    path = "/".join(nodes)
    return f"{path} {field}" if field else path


class LoaderError(RuntimeError):
    """A tree snapshot could not be read or written."""

    def __init__(self, file_path: str, message: str, *, cause: Exception | None = None):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        super().__init__(str(self))

    @property
    def problems(self) -> List[str]:
        """One entry per invalid node when the cause is a validation error."""
        if not isinstance(self.cause, ValidationError):
            return []
        return [f"{describe_node(err['loc'])}: {err['msg']}" for err in self.cause.errors()]

    def __str__(self) -> str:
        base = f"{self.message} ({self.file_path})"
        if self.problems:
            shown = self.problems[:3]
            extra = len(self.problems) - len(shown)
            detail = "; ".join(shown) + (f"; ... ({extra} more)" if extra else "")
            return f"{base}: {detail}"
        if self.cause:
            return f"{base}: {self.cause}"
        return base
