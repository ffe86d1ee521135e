"""
Console rendering for materialized shrink trees.

Builds a ``rich.tree.Tree`` from a StrictTree so the shrink order can be read
top to bottom: the first child listed under a node is the first shrink a
search tries.
"""

from __future__ import annotations

from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree as RichTree

from shrinktree.core.tree.models import StrictTree


def format_top(top) -> str:
    if isinstance(top, str):
        return repr(top)
    return str(top)


def build_rich_tree(
    strict: StrictTree,
    label: Optional[str] = None,
    *,
    highlight: Optional[Callable[[object], bool]] = None,
) -> RichTree:
    """
    Convert a StrictTree into a rich renderable.

    Args:
        strict: Snapshot to render
        label: Optional title shown above the root value
        highlight: Optional predicate; matching tops are shown in green

    Returns:
        rich Tree with one node per snapshot node
    """

    def node_label(top) -> str:
        text = escape(format_top(top))
        if highlight is not None and highlight(top):
            return f"[green]{text}[/green]"
        return text

    root_label = node_label(strict.top)
    if label:
        root_label = f"[bold]{escape(label)}[/bold] {root_label}"
    root = RichTree(root_label)

    def add_children(parent: RichTree, node: StrictTree) -> None:
        for child in node.forest:
            add_children(parent.add(node_label(child.top)), child)

    add_children(root, strict)
    return root


def render_strict_tree(strict: StrictTree, console: Console, label: Optional[str] = None) -> None:
    console.print(build_rich_tree(strict, label))
    console.print(f"[dim]{strict.size()} node(s), height {strict.height()}[/dim]")


__all__ = ["build_rich_tree", "render_strict_tree", "format_top"]
