"""Tests for the recursive tree transforms."""

import pytest

from field_access.utils.tree import (
    get_path,
    iter_leaves,
    join_path,
    set_path,
    tag_paths,
    tree_join,
    tree_map,
)


def is_data_leaf(value):
    return isinstance(value, dict) and "data" in value and "permissions" in value


class TestTreeMap:
    """Tests for tree_map."""

    def test_preserves_structure(self):
        """Nested structure is kept and only leaves are transformed."""
        tree = {"a": 1, "b": {"c": 2, "d": {"e": 3}}}

        result = tree_map(tree, lambda key, value: value * 10)

        assert result == {"a": 10, "b": {"c": 20, "d": {"e": 30}}}

    def test_passes_key_to_transform(self):
        """The transform receives the leaf's own key."""
        result = tree_map({"x": 1, "y": {"z": 2}}, lambda key, value: key)

        assert result == {"x": "x", "y": {"z": "z"}}

    def test_sequences_are_leaves(self):
        """Lists are handed to the transform whole."""
        result = tree_map({"tags": ["a", "b"]}, lambda key, value: len(value))

        assert result == {"tags": 2}

    def test_leaf_predicate_stops_descent(self):
        """Mappings matching is_leaf are transformed, not walked."""
        tree = {"field": {"admin": "CRUD"}, "nested": {"inner": {"admin": "R"}}}

        result = tree_map(
            tree,
            lambda key, value: value["admin"],
            is_leaf=lambda value: isinstance(value, dict) and "admin" in value,
        )

        assert result == {"field": "CRUD", "nested": {"inner": "R"}}

    def test_empty_tree(self):
        """Empty trees map to empty trees."""
        assert tree_map({}, lambda key, value: value) == {}

    def test_does_not_mutate_input(self):
        """The input tree is left untouched."""
        tree = {"a": {"b": 1}}

        tree_map(tree, lambda key, value: value + 1)

        assert tree == {"a": {"b": 1}}


class TestTreeJoin:
    """Tests for tree_join."""

    def test_pairs_parallel_leaves(self):
        """Leaves at the same position are paired under the given names."""
        data = {"name": "Alice", "profile": {"bio": "Hi"}}
        permissions = {"name": "CRUD", "profile": {"bio": "R"}}

        result = tree_join(data, "value", permissions, "permissions")

        assert result == {
            "name": {"value": "Alice", "permissions": "CRUD"},
            "profile": {"bio": {"value": "Hi", "permissions": "R"}},
        }

    def test_missing_key_pairs_with_none(self):
        """Keys absent from the second tree pair with None."""
        result = tree_join({"name": "Alice", "age": 30}, "value", {"name": "R"}, "permissions")

        assert result["age"] == {"value": 30, "permissions": None}

    def test_second_tree_missing_entirely(self):
        """A missing subtree on the second side pairs every leaf with None."""
        result = tree_join({"profile": {"bio": "Hi"}}, "value", {}, "permissions")

        assert result == {"profile": {"value": {"bio": "Hi"}, "permissions": None}}

    def test_structure_facing_leaf_is_paired_whole(self):
        """A nested value facing a leaf on the other side is not walked."""
        result = tree_join({"profile": {"bio": "Hi"}}, "value", {"profile": "R"}, "permissions")

        assert result == {"profile": {"value": {"bio": "Hi"}, "permissions": "R"}}

    def test_extra_keys_in_second_tree_ignored(self):
        """Only the first tree's keys drive the walk."""
        result = tree_join({"a": 1}, "value", {"a": "R", "b": "CRUD"}, "permissions")

        assert list(result.keys()) == ["a"]

    def test_custom_node_type(self):
        """Paired nodes are built with node_type."""
        class Pair(dict):
            pass

        result = tree_join({"a": 1}, "value", {"a": "R"}, "permissions", node_type=Pair)

        assert isinstance(result["a"], Pair)


class TestTagPaths:
    """Tests for tag_paths."""

    def test_nested_leaf_gets_dotted_path(self):
        """A guarded leaf nested under profile is tagged profile.bio."""
        tree = {"profile": {"bio": {"data": "x", "permissions": []}}}

        result = tag_paths(tree, is_data_leaf)

        assert result["profile"]["bio"]["path"] == "profile.bio"
        assert result["profile"]["bio"]["data"] == "x"

    def test_top_level_leaf_path_is_key(self):
        """Top-level leaves are tagged with their bare key."""
        result = tag_paths({"name": {"data": "Alice", "permissions": ["read"]}}, is_data_leaf)

        assert result["name"]["path"] == "name"

    def test_non_matching_values_are_dropped(self):
        """Values that are neither guarded leaves nor structures are dropped."""
        tree = {"name": {"data": "Alice", "permissions": []}, "stray": 5}

        result = tag_paths(tree, is_data_leaf)

        assert "stray" not in result

    def test_transform_applied_before_tagging(self):
        """transform reshapes each leaf before its path is added."""
        tree = {"name": {"data": "Alice", "permissions": []}}

        result = tag_paths(tree, is_data_leaf, transform=lambda leaf: {"value": leaf["data"]})

        assert result == {"name": {"value": "Alice", "path": "name"}}

    def test_parent_path_prefix(self):
        """parent_path prefixes every produced path."""
        result = tag_paths({"bio": {"data": "x", "permissions": []}}, is_data_leaf, parent_path="user")

        assert result["bio"]["path"] == "user.bio"


class TestPathHelpers:
    """Tests for dotted path helpers."""

    def test_join_path(self):
        assert join_path("", "name") == "name"
        assert join_path("profile", "bio") == "profile.bio"

    def test_get_path(self):
        tree = {"profile": {"bio": "Hi"}}

        assert get_path(tree, "profile.bio") == "Hi"
        assert get_path(tree, "profile.missing") is None
        assert get_path(tree, "profile.bio.deeper", default="x") == "x"

    def test_set_path_creates_intermediates(self):
        tree = {}

        set_path(tree, "profile.bio", "Hi")
        set_path(tree, "profile.website", "example.org")

        assert tree == {"profile": {"bio": "Hi", "website": "example.org"}}

    def test_iter_leaves(self):
        tree = {"a": 1, "b": {"c": 2, "d": {"e": 3}}}

        assert list(iter_leaves(tree)) == [1, 2, 3]

    @pytest.mark.parametrize("tree", [{}, {"a": {}}])
    def test_iter_leaves_empty(self, tree):
        assert list(iter_leaves(tree)) == []
