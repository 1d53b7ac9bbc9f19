"""Permissions feature for field-access.

Feature-first layout for field-level permission handling:
- entities/: permissions, shorthands and role tables
- services/: shorthand codec, role-permission merge, schema checks
"""

# Permission entities and role tables
from .entities import (
    Permission, PermissionFlag, PermissionShorthand, PermissionInput,
    FULL_ACCESS, NO_ACCESS,
    Role, RolePermissionsMap, is_role_permissions_map,
    new_role_permissions_map, apply_single_role_permissions_map,
    update_permission_field, update_role_permission,
)

# Codec, merge and schema services
from .services import (
    to_shorthand, parse_shorthand, expand, permission_list, merge,
    compute_default_permissions,
    validate_permission_schema, ensure_permission_schema,
)

__all__ = [
    # Entities
    "Permission",
    "PermissionFlag",
    "PermissionShorthand",
    "PermissionInput",
    "FULL_ACCESS",
    "NO_ACCESS",

    # Role tables
    "Role",
    "RolePermissionsMap",
    "is_role_permissions_map",
    "new_role_permissions_map",
    "apply_single_role_permissions_map",
    "update_permission_field",
    "update_role_permission",

    # Services
    "to_shorthand",
    "parse_shorthand",
    "expand",
    "permission_list",
    "merge",
    "compute_default_permissions",
    "validate_permission_schema",
    "ensure_permission_schema",
]
