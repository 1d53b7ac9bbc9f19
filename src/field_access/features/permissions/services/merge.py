"""Role-permission merge.

Reduces a FieldPermissions tree (one RolePermissionsMap per field) to an
AppliedPermissions tree (one merged shorthand per field) for the roles a
client holds.
"""

import logging
from functools import reduce
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from ....utils.tree import is_structure, iter_leaves, tree_map
from ..entities.permission import CANONICAL_ORDER, Permission, PermissionFlag, PermissionShorthand
from ..entities.role_permissions import Role, is_role_permissions_map
from .codec import merge, permission_list, to_flags, to_shorthand

logger = logging.getLogger(__name__)

ALL_FLAGS = PermissionFlag.CREATE | PermissionFlag.READ | PermissionFlag.UPDATE | PermissionFlag.DELETE


def merge_role_permissions(
    role_permissions: Mapping[Role, Any],
    roles: Iterable[Role],
) -> PermissionShorthand:
    """Merge the entries of every held role in one field's role table.

    Roles with no entry contribute nothing.
    """
    shorthands = []
    for role in roles:
        permissions = role_permissions.get(role)
        if not permissions:
            continue
        if isinstance(permissions, str):
            shorthands.append(permissions)
        else:
            shorthands.append(to_shorthand(permissions))
    return merge(*shorthands)


def compute_default_permissions(
    field_permissions: Mapping[str, Any],
    roles: Sequence[Role],
) -> Dict[str, Any]:
    """Compute one merged shorthand per field for the given roles.

    Every role table, typed or a plain role-to-permissions mapping, is a
    leaf; nested record structure is preserved. With no roles every field resolves to the empty shorthand.

    Args:
        field_permissions: FieldPermissions tree
        roles: Roles held by the client

    Returns:
        AppliedPermissions tree
    """
    roles = list(roles)

    def _merge_field(key: str, role_permissions: Any) -> PermissionShorthand:
        if not isinstance(role_permissions, Mapping):
            logger.debug(f"Field '{key}' has no role table; granting nothing")
            return ""
        return merge_role_permissions(role_permissions, roles)

    return tree_map(field_permissions, _merge_field, is_role_permissions_map)


def resolve_field_permissions(permissions: Any) -> List[Permission]:
    """Resolve the permissions guarding one position of an AppliedPermissions tree.

    A leaf resolves directly; ``None`` (no entry) grants nothing. A nested
    subtree resolves to the permissions granted on every field inside it,
    which is what an edit replacing the whole subtree needs.
    """
    if not is_structure(permissions):
        return permission_list(permissions)
    leaves = list(iter_leaves(permissions))
    if not leaves:
        return []
    flags = reduce(lambda acc, leaf: acc & to_flags(leaf), leaves, ALL_FLAGS)
    return [p for p in CANONICAL_ORDER if flags & p.flag]
