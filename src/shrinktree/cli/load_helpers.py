from __future__ import annotations

"""Shared helpers for loading tree snapshots with CLI-friendly errors."""

from pathlib import Path
from typing import Callable, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from shrinktree.io import LoaderError

T = TypeVar("T")


def load_or_exit(
    loader_fn: Callable[[str], T],
    path: str,
    *,
    console: Console,
    verbose_errors: bool = False,
) -> T:
    if not Path(path).exists():
        console.print(f"[red]Path not found:[/red] {escape(path)}")
        raise typer.Exit(code=1)
    try:
        return loader_fn(path)
    except LoaderError as err:
        if verbose_errors and err.cause:
            console.print(f"[red]Failed to load tree:[/red] {escape(err.message)}\n{escape(str(err.cause))}")
        else:
            console.print(f"[red]Failed to load tree:[/red] {escape(str(err))}")
        raise typer.Exit(code=1)


__all__ = ["load_or_exit"]
