"""Tests for role-permission merging and role-table helpers."""

import pytest

from field_access.features.permissions import (
    Permission,
    RolePermissionsMap,
    apply_single_role_permissions_map,
    compute_default_permissions,
    is_role_permissions_map,
    new_role_permissions_map,
    update_permission_field,
    update_role_permission,
)
from field_access.features.permissions.services import (
    merge_role_permissions,
    resolve_field_permissions,
)


class TestMergeRolePermissions:
    """Tests for merging one field's role table."""

    def test_multiple_roles_union(self):
        """admin CR and user U merge to exactly CRU."""
        table = new_role_permissions_map(("admin", "CR"), ("user", "U"))

        merged = merge_role_permissions(table, ["admin", "user"])

        assert merged == "CRU"
        assert set(resolve_field_permissions(merged)) == {
            Permission.CREATE,
            Permission.READ,
            Permission.UPDATE,
        }

    def test_unknown_role_contributes_nothing(self):
        table = new_role_permissions_map(("admin", "CRUD"))

        assert merge_role_permissions(table, ["guest"]) == ""

    def test_no_roles(self):
        table = new_role_permissions_map(("admin", "CRUD"))

        assert merge_role_permissions(table, []) == ""

    def test_permission_collections_as_entries(self):
        table = new_role_permissions_map(("admin", [Permission.DELETE, Permission.READ]))

        assert merge_role_permissions(table, ["admin"]) == "RD"

    def test_role_order_irrelevant(self):
        table = new_role_permissions_map(("a", "D"), ("b", "C"))

        assert merge_role_permissions(table, ["a", "b"]) == merge_role_permissions(table, ["b", "a"])


class TestComputeDefaultPermissions:
    """Tests for computing applied permissions from a permission table."""

    def test_preserves_nested_structure(self, sample_field_permissions):
        applied = compute_default_permissions(sample_field_permissions, ["user"])

        assert applied == {
            "name": "R",
            "age": "",
            "profile": {"bio": "RU", "website": "CR"},
            "tags": "",
        }

    def test_multiple_roles(self, sample_field_permissions):
        applied = compute_default_permissions(sample_field_permissions, ["admin", "user"])

        assert applied["name"] == "CRUD"
        assert applied["age"] == "CUD"

    def test_no_roles_grants_nothing(self, sample_field_permissions):
        applied = compute_default_permissions(sample_field_permissions, [])

        assert applied["profile"] == {"bio": "", "website": ""}

    def test_plain_dict_role_tables(self):
        """Plain role-to-permissions dicts are merged like RolePermissionsMap."""
        field_permissions = {
            "name": {"admin": "CRUD", "user": "R"},
            "profile": {"bio": {"admin": ["read", "update"]}},
        }

        applied = compute_default_permissions(field_permissions, ["admin"])

        assert applied == {"name": "CRUD", "profile": {"bio": "RU"}}

    def test_field_without_role_table(self):
        """A leaf that is not a role table grants nothing."""
        applied = compute_default_permissions({"name": None}, ["admin"])

        assert applied == {"name": ""}


class TestResolveFieldPermissions:
    """Tests for resolving a position of an applied permissions tree."""

    def test_leaf(self):
        assert resolve_field_permissions("RU") == [Permission.READ, Permission.UPDATE]

    def test_missing_entry(self):
        assert resolve_field_permissions(None) == []

    def test_subtree_intersection(self):
        """A subtree grants only what every field inside it grants."""
        subtree = {"bio": "CRU", "website": {"url": "RUD"}}

        assert resolve_field_permissions(subtree) == [Permission.READ, Permission.UPDATE]

    def test_empty_subtree(self):
        assert resolve_field_permissions({}) == []


class TestRoleTableHelpers:
    """Tests for building and editing role tables."""

    def test_new_role_permissions_map(self):
        table = new_role_permissions_map(("admin", "CRUD"), ("user", "R"))

        assert isinstance(table, RolePermissionsMap)
        assert table == {"admin": "CRUD", "user": "R"}
        assert is_role_permissions_map(table)

    @pytest.mark.parametrize(
        "value",
        [{"admin": "CRUD"}, {"admin": ["read"], "user": None}, {"owner": ("update",)}],
    )
    def test_plain_mapping_is_role_table(self, value):
        assert is_role_permissions_map(value)

    @pytest.mark.parametrize("value", [{}, {"bio": {"admin": "R"}}, "CRUD", None])
    def test_not_role_table(self, value):
        assert not is_role_permissions_map(value)

    def test_apply_single_role_permissions_map(self, sample_user_data):
        table = new_role_permissions_map(("admin", "CRUD"))

        field_permissions = apply_single_role_permissions_map(sample_user_data, table)

        assert field_permissions["name"] is table
        assert field_permissions["profile"]["bio"] is table
        assert field_permissions["tags"] is table
        assert compute_default_permissions(field_permissions, ["admin"])["profile"]["website"] == "CRUD"

    def test_update_permission_field(self, sample_field_permissions):
        replacement = new_role_permissions_map(("user", "CRUD"))

        update_permission_field(sample_field_permissions, "profile.bio", replacement)

        assert sample_field_permissions["profile"]["bio"] is replacement

    def test_update_permission_field_on_applied_tree(self):
        applied = {"name": "R", "profile": {"bio": "R"}}

        update_permission_field(applied, "profile.bio", "RU")

        assert applied == {"name": "R", "profile": {"bio": "RU"}}

    def test_update_permission_field_missing_parent(self):
        with pytest.raises(KeyError):
            update_permission_field({"name": "R"}, "profile.bio", "R")

    def test_update_permission_field_leaf_parent(self):
        with pytest.raises(KeyError):
            update_permission_field({"name": "R"}, "name.first", "R")

    def test_update_role_permission(self):
        table = new_role_permissions_map(("admin", "R"))

        update_role_permission(table, "admin", "CRUD")
        update_role_permission(table, "owner", "RU")

        assert table == {"admin": "CRUD", "owner": "RU"}
