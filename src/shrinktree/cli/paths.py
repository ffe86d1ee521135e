from __future__ import annotations

"""Utilities for resolving output paths for saved tree snapshots."""

from pathlib import Path


def outputs_dir() -> Path:
    return Path.cwd() / "outputs"


def trees_dir() -> Path:
    return outputs_dir() / "trees"


def ensure_output_dirs() -> None:
    trees_dir().mkdir(parents=True, exist_ok=True)


def resolve_tree_path(name: str) -> str:
    """Resolve a snapshot filename under outputs/trees.

    Only the base name is used. A missing .yaml extension is added.
    """
    ensure_output_dirs()
    base = Path(name).name
    if not base.endswith(".yaml"):
        base = f"{base}.yaml"
    return str(trees_dir() / base)


def find_tree_file(name_or_path: str) -> str:
    """
    Find a snapshot file.

    1. If the path exists as given, use it
    2. If it exists with a .yaml extension, use that
    3. Otherwise look in outputs/trees/

    Raises:
        FileNotFoundError: If the file cannot be found
    """
    p = Path(name_or_path)
    if p.exists():
        return str(p)

    if not str(name_or_path).endswith(".yaml"):
        p_with_yaml = Path(f"{name_or_path}.yaml")
        if p_with_yaml.exists():
            return str(p_with_yaml)

    base_name = p.name if p.name.endswith(".yaml") else f"{p.name}.yaml"
    tree_file = trees_dir() / base_name
    if tree_file.exists():
        return str(tree_file)

    raise FileNotFoundError(
        f"Tree snapshot not found: '{name_or_path}'\nLooked in:\n  - {name_or_path}\n  - {tree_file}"
    )


__all__ = ["outputs_dir", "trees_dir", "ensure_output_dirs", "resolve_tree_path", "find_tree_file"]
