"""Strict schema checking for permission tables.

By default a permission table that does not mirror its data is tolerated:
missing fields simply grant nothing. Services that prefer to fail loudly
can run these checks, either directly or via ``ControllerConfig.strict_schema``.
"""

from typing import Any, List, Mapping

from ....core.exceptions import SchemaMismatchError
from ....utils.tree import is_structure, join_path
from ..entities.role_permissions import is_role_permissions_map


def validate_permission_schema(
    data: Mapping[str, Any],
    field_permissions: Mapping[str, Any],
    parent_path: str = "",
) -> List[str]:
    """List every dotted path where ``field_permissions`` does not mirror ``data``.

    A path is reported when the table has no entry for it, or when one side
    holds a nested structure and the other a leaf.

    Returns:
        Offending paths in data order (empty if the table fits)
    """
    mismatches: List[str] = []
    for key, value in data.items():
        current_path = join_path(parent_path, key)
        if key not in field_permissions:
            mismatches.append(current_path)
            continue

        permissions = field_permissions[key]
        permissions_nested = is_structure(permissions) and not is_role_permissions_map(permissions)
        if is_structure(value):
            if permissions_nested:
                mismatches.extend(validate_permission_schema(value, permissions, current_path))
            else:
                mismatches.append(current_path)
        elif permissions_nested:
            mismatches.append(current_path)
    return mismatches


def ensure_permission_schema(data: Mapping[str, Any], field_permissions: Mapping[str, Any]) -> None:
    """Raise if ``field_permissions`` does not mirror ``data``.

    Raises:
        SchemaMismatchError: Listing every offending path
    """
    mismatches = validate_permission_schema(data, field_permissions)
    if mismatches:
        raise SchemaMismatchError(mismatches)
