"""
Tree Visualizer module.

Renders materialized shrink trees (StrictTree) to the console with rich.
"""

from shrinktree.visualizer.renderer import build_rich_tree, format_top, render_strict_tree

__all__ = ["build_rich_tree", "format_top", "render_strict_tree"]
