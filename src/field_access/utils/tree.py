"""Recursive transforms over nested record trees.

A record tree is a mapping whose values are either nested mappings or
leaves. Sequences are always leaves and are never walked element-wise.
Every walk in the engine goes through the three transforms here, each
parameterized by a leaf predicate:

- ``tree_map``: structure-preserving map applying a transform at leaves
- ``tree_join``: pairwise join of two parallel trees into paired leaves
- ``tag_paths``: rewrite guarded leaves into nodes carrying their dotted path
"""

from typing import Any, Callable, Dict, Iterator, Mapping, Optional

LeafPredicate = Callable[[Any], bool]
LeafTransform = Callable[[str, Any], Any]

PATH_KEY = "path"
PATH_SEPARATOR = "."


def is_structure(value: Any) -> bool:
    """Return True if ``value`` is a nested structure the walks descend into."""
    return isinstance(value, Mapping)


def _never(value: Any) -> bool:
    return False


def join_path(parent_path: str, key: str) -> str:
    """Append ``key`` to a dotted path."""
    return f"{parent_path}{PATH_SEPARATOR}{key}" if parent_path else str(key)


def tree_map(
    tree: Mapping[str, Any],
    leaf_transform: LeafTransform,
    is_leaf: Optional[LeafPredicate] = None,
) -> Dict[str, Any]:
    """Map every leaf of ``tree`` while preserving its key structure.

    ``is_leaf`` is checked first, so domain objects that happen to be
    mappings can be declared terminal. Otherwise nested structures are
    recursed into and everything else is handed to ``leaf_transform``.

    Args:
        tree: Nested mapping to walk
        leaf_transform: Called as ``leaf_transform(key, value)`` at each leaf
        is_leaf: Predicate marking values as leaves (default: never)

    Returns:
        New tree with the same keys and transformed leaves
    """
    is_leaf = is_leaf or _never
    mapped: Dict[str, Any] = {}
    for key, value in tree.items():
        if is_leaf(value):
            mapped[key] = leaf_transform(key, value)
        elif is_structure(value):
            mapped[key] = tree_map(value, leaf_transform, is_leaf)
        else:
            mapped[key] = leaf_transform(key, value)
    return mapped


def tree_join(
    tree_a: Mapping[str, Any],
    name_a: str,
    tree_b: Optional[Mapping[str, Any]],
    name_b: str,
    node_type: Callable[[Dict[str, Any]], Any] = dict,
) -> Dict[str, Any]:
    """Join two parallel trees into a tree of paired leaves.

    Walks the keys of ``tree_a``. Where both sides hold a nested structure
    the walk recurses; anywhere else a node ``{name_a: a, name_b: b}`` is
    produced. Keys missing from ``tree_b`` pair with ``None``.

    Args:
        tree_a: Tree whose key set drives the walk
        name_a: Key under which values from ``tree_a`` are stored
        tree_b: Parallel tree
        name_b: Key under which values from ``tree_b`` are stored
        node_type: Constructor for the paired nodes (default: dict)

    Returns:
        Joined tree mirroring ``tree_a``'s shape
    """
    joined: Dict[str, Any] = {}
    for key, value_a in tree_a.items():
        value_b = tree_b.get(key) if is_structure(tree_b) else None
        if is_structure(value_a) and is_structure(value_b):
            joined[key] = tree_join(value_a, name_a, value_b, name_b, node_type)
        else:
            joined[key] = node_type({name_a: value_a, name_b: value_b})
    return joined


def tag_paths(
    tree: Mapping[str, Any],
    is_leaf: LeafPredicate,
    transform: Optional[Callable[[Any], Mapping[str, Any]]] = None,
    parent_path: str = "",
    node_type: Callable[[Dict[str, Any]], Any] = dict,
) -> Dict[str, Any]:
    """Rewrite guarded leaves into nodes carrying their dotted access path.

    Values matching ``is_leaf`` become ``{**transform(value), "path": ...}``.
    Nested structures are recursed into. Anything else is dropped.

    Args:
        tree: Nested mapping to walk
        is_leaf: Predicate identifying leaf nodes
        transform: Optional mapping applied to each leaf before tagging
        parent_path: Dotted prefix for every produced path
        node_type: Constructor for the tagged leaves (default: dict)

    Returns:
        Tree of path-tagged leaves
    """
    tagged: Dict[str, Any] = {}
    for key, value in tree.items():
        current_path = join_path(parent_path, key)
        if is_leaf(value):
            leaf = transform(value) if transform else value
            tagged[key] = node_type({**leaf, PATH_KEY: current_path})
        elif is_structure(value):
            tagged[key] = tag_paths(value, is_leaf, transform, current_path, node_type)
    return tagged


def get_path(tree: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Read the value at a dotted path, or ``default`` if any step is missing."""
    current: Any = tree
    for key in path.split(PATH_SEPARATOR):
        if not is_structure(current) or key not in current:
            return default
        current = current[key]
    return current


def set_path(tree: Dict[str, Any], path: str, value: Any) -> None:
    """Set the value at a dotted path in place, creating intermediate dicts."""
    keys = path.split(PATH_SEPARATOR)
    current = tree
    for key in keys[:-1]:
        if not is_structure(current.get(key)):
            current[key] = {}
        current = current[key]
    current[keys[-1]] = value


def iter_leaves(tree: Mapping[str, Any], is_leaf: Optional[LeafPredicate] = None) -> Iterator[Any]:
    """Yield every leaf value of ``tree`` in walk order."""
    is_leaf = is_leaf or _never
    for value in tree.values():
        if not is_leaf(value) and is_structure(value):
            yield from iter_leaves(value, is_leaf)
        else:
            yield value
