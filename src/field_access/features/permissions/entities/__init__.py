"""Permission entities package."""

from .permission import (
    Permission,
    PermissionFlag,
    PermissionShorthand,
    PermissionInput,
    CANONICAL_ORDER,
    PERMISSION_LETTERS,
    SHORTHAND_LETTERS,
    FULL_ACCESS,
    NO_ACCESS,
)
from .role_permissions import (
    Role,
    RolePermissionsMap,
    RolePermissionDefinition,
    is_role_permissions_map,
    new_role_permissions_map,
    apply_single_role_permissions_map,
    update_permission_field,
    update_role_permission,
)

__all__ = [
    # Permissions
    "Permission",
    "PermissionFlag",
    "PermissionShorthand",
    "PermissionInput",
    "CANONICAL_ORDER",
    "PERMISSION_LETTERS",
    "SHORTHAND_LETTERS",
    "FULL_ACCESS",
    "NO_ACCESS",

    # Role tables
    "Role",
    "RolePermissionsMap",
    "RolePermissionDefinition",
    "is_role_permissions_map",
    "new_role_permissions_map",
    "apply_single_role_permissions_map",
    "update_permission_field",
    "update_role_permission",
]
