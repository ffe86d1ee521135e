from .errors import LoaderError
from .yaml_io import load_strict_tree_from_yaml, save_strict_tree_to_yaml

__all__ = ["LoaderError", "load_strict_tree_from_yaml", "save_strict_tree_to_yaml"]
