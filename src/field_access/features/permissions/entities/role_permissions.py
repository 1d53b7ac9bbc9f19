"""Role-to-permission tables attached to record fields.

A ``RolePermissionsMap`` sits at every leaf of a FieldPermissions tree and
says what each role may do with that field. Plain mappings work too: a
mapping whose values are all permission inputs (shorthands or permission
collections) is a role table, while a nested record structure always holds
mappings.
"""

from typing import Any, Collection, Dict, Hashable, Mapping, Tuple

from ....utils.tree import is_structure, tree_map
from .permission import PermissionInput

Role = Hashable

# (role, permissions) pair used to build a RolePermissionsMap
RolePermissionDefinition = Tuple[Role, PermissionInput]


class RolePermissionsMap(Dict[Role, PermissionInput]):
    """Mapping of role to the permissions that role holds on one field."""

    def __repr__(self) -> str:
        return f"RolePermissionsMap({dict.__repr__(self)})"


def is_permission_input(value: Any) -> bool:
    """Return True for a shorthand, a permission collection or ``None``."""
    return value is None or isinstance(value, str) or (
        isinstance(value, Collection) and not isinstance(value, Mapping)
    )


def is_role_permissions_map(value: Any) -> bool:
    """Return True if ``value`` is a role table leaf.

    Empty plain mappings are nested structures with no fields.
    """
    if isinstance(value, RolePermissionsMap):
        return True
    return is_structure(value) and bool(value) and all(
        is_permission_input(permissions) for permissions in value.values()
    )


def new_role_permissions_map(*role_permissions: RolePermissionDefinition) -> RolePermissionsMap:
    """Create a RolePermissionsMap from ``(role, permissions)`` pairs.

    Example:
        new_role_permissions_map(("admin", "CRUD"), ("user", "R"))
    """
    return RolePermissionsMap(role_permissions)


def apply_single_role_permissions_map(
    data: Mapping[str, Any],
    permission_map: RolePermissionsMap,
) -> Dict[str, Any]:
    """Build a FieldPermissions tree giving every field of ``data`` the same map."""
    return tree_map(data, lambda _key, _value: permission_map)


def update_permission_field(
    permissions: Dict[str, Any],
    path: str,
    value: Any,
) -> None:
    """Replace the permissions at a dotted ``path`` in place.

    Works on both FieldPermissions and AppliedPermissions trees; the
    parent of the final key must already exist.

    Raises:
        KeyError: If an intermediate key is missing or not a structure
    """
    keys = path.split(".")
    current = permissions
    for key in keys[:-1]:
        current = current[key]
        if not is_structure(current):
            raise KeyError(f"'{key}' in '{path}' is not a nested structure")
    current[keys[-1]] = value


def update_role_permission(
    role_permissions: Dict[Role, PermissionInput],
    role: Role,
    value: PermissionInput,
) -> None:
    """Set the permissions one role holds in a role table."""
    role_permissions[role] = value
