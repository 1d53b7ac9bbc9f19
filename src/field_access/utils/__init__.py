"""Utility functions for field-access."""

from .tree import (
    PATH_KEY,
    is_structure,
    join_path,
    tree_map,
    tree_join,
    tag_paths,
    iter_leaves,
    get_path,
    set_path,
)

__all__ = [
    "PATH_KEY",
    "is_structure",
    "join_path",
    "tree_map",
    "tree_join",
    "tag_paths",
    "iter_leaves",
    "get_path",
    "set_path",
]
