"""
shrinktree CLI: inspect shrink trees and try the minimizing search.

Commands build trees from the integer shrinker so the shrink order, the
effect of fair versus left-first pairing, and fuel accounting can be seen
directly in the terminal.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from shrinktree.cli.load_helpers import load_or_exit
from shrinktree.cli.paths import find_tree_file, resolve_tree_path
from shrinktree.core.settings import DEPTH_ENV, FUEL_ENV, ShrinkSettings
from shrinktree.core.tree import int_tree
from shrinktree.io import load_strict_tree_from_yaml, save_strict_tree_to_yaml
from shrinktree.visualizer import render_strict_tree

app = typer.Typer(help="shrinktree CLI: inspect shrink trees and run the leftmost shrinking search.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _settings_or_exit() -> ShrinkSettings:
    try:
        return ShrinkSettings.from_env()
    except ValidationError as err:
        fields = ", ".join(".".join(str(part) for part in e["loc"]) for e in err.errors())
        console.print(
            f"[red]Invalid environment settings:[/red] {escape(fields)} "
            f"(check {FUEL_ENV} / {DEPTH_ENV}; expected integers)"
        )
        raise typer.Exit(code=1)


def _depth_or_default(depth: Optional[int]) -> int:
    return depth if depth is not None else _settings_or_exit().depth


@app.command("show-int")
def show_int(
    value: int = typer.Argument(..., help="Integer to shrink"),
    target: int = typer.Option(0, help="Value the shrinker moves towards"),
    depth: Optional[int] = typer.Option(None, help="Levels to materialize (default from SHRINKTREE_DEPTH)"),
    save: Optional[str] = typer.Option(None, "--save", help="Save the snapshot as outputs/trees/<name>.yaml"),
) -> None:
    """Render the shrink tree of an integer."""
    strict = int_tree(value, target).force(_depth_or_default(depth))
    render_strict_tree(strict, console, label="int")

    if save:
        path = resolve_tree_path(save)
        save_strict_tree_to_yaml(strict, path)
        console.print(f"[green]Saved[/green] {path}")


@app.command("show-pair")
def show_pair(
    first: int = typer.Argument(..., help="First integer"),
    second: int = typer.Argument(..., help="Second integer"),
    depth: Optional[int] = typer.Option(None, help="Levels to materialize (default from SHRINKTREE_DEPTH)"),
    fair: bool = typer.Option(True, "--fair/--left-first", help="Fair distribution or left-first chaining"),
) -> None:
    """Render the shrink tree of a pair of integers."""
    left, right = int_tree(first), int_tree(second)
    pair = left.fair_pair(right) if fair else left.left_first_pair(right)
    strict = pair.force(_depth_or_default(depth))
    render_strict_tree(strict, console, label="fair pair" if fair else "left-first pair")


@app.command("shrink-int")
def shrink_int_command(
    value: int = typer.Argument(..., help="Failing integer to start from"),
    min_failing: int = typer.Option(..., "--min-failing", help="Candidates >= this value still fail"),
    target: int = typer.Option(0, help="Value the shrinker moves towards"),
    fuel: Optional[int] = typer.Option(None, help="Children the search may inspect (default from SHRINKTREE_FUEL)"),
) -> None:
    """Minimize an integer with the leftmost search."""
    budget = fuel if fuel is not None else _settings_or_exit().fuel
    result = int_tree(value, target).left_first_search(lambda x: x >= min_failing, budget)

    if result is None:
        console.print(f"[yellow]No match:[/yellow] {value} does not satisfy x >= {min_failing}")
        raise typer.Exit(code=1)

    console.print(f"Minimized: [bold]{result.top}[/bold]")
    console.print(f"Depth: {result.depth}")
    console.print(f"Fuel remaining: {result.fuel if result.fuel >= 0 else 'unbounded'}")


@app.command("load")
def load_tree(
    name: str = typer.Argument(..., help="Snapshot path or name under outputs/trees"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display the full cause on loader errors"),
) -> None:
    """Render a saved tree snapshot."""
    try:
        path = find_tree_file(name)
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    strict = load_or_exit(load_strict_tree_from_yaml, path, console=console, verbose_errors=verbose)
    render_strict_tree(strict, console, label=name)


if __name__ == "__main__":
    app()
