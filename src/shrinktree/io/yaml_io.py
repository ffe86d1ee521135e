"""YAML persistence for StrictTree snapshots."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from shrinktree.core.tree.models import StrictTree
from shrinktree.io.errors import LoaderError

logger = logging.getLogger(__name__)


def save_strict_tree_to_yaml(strict: StrictTree, file_path: str) -> None:
    """
    Save a materialized tree to a YAML file.

    Tops are written as plain data: tuples become lists and values YAML
    cannot represent are written as their repr.

    Args:
        strict: Snapshot produced by ``Tree.force``
        file_path: Output file path (parent directories are created)
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(path, "w") as f:
            yaml.dump(strict.to_dict(), f, default_flow_style=False, indent=2, sort_keys=False)
    except OSError as e:
        raise LoaderError(str(path), "Failed to write tree snapshot", cause=e) from e
    logger.info("Saved tree snapshot (%d nodes) to: %s", strict.size(), path)


def load_strict_tree_from_yaml(file_path: str) -> StrictTree:
    """
    Load a snapshot written by ``save_strict_tree_to_yaml``.

    Raises:
        LoaderError: If the file is missing, is not valid YAML, or does not
            describe a tree
    """
    path = Path(file_path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise LoaderError(str(path), "Failed to read tree snapshot", cause=e) from e
    except yaml.YAMLError as e:
        raise LoaderError(str(path), "Invalid YAML", cause=e) from e

    if not isinstance(data, dict):
        raise LoaderError(str(path), "Tree snapshot must be a mapping with 'top' and 'forest'")
    try:
        strict = StrictTree.model_validate(data)
    except ValidationError as e:
        raise LoaderError(str(path), "Invalid tree snapshot", cause=e) from e
    logger.debug("Loaded tree snapshot (%d nodes) from: %s", strict.size(), path)
    return strict


__all__ = ["save_strict_tree_to_yaml", "load_strict_tree_from_yaml"]
