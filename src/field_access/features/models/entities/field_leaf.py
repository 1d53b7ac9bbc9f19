"""Path-addressable accessor over sanitized responses.

Lets calling code address a field by its dotted path instead of walking
nested objects, and turn edits on those fields back into a partial update.
"""

import copy
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from ....utils.tree import PATH_KEY, get_path, set_path, tag_paths
from ...permissions.entities import Permission
from ...permissions.services import permission_list
from .response import DATA_KEY, PERMISSIONS_KEY, is_sanitized_field


class FieldLeaf(dict):
    """A sanitized field tagged with its path and derived capability flags."""

    @property
    def value(self) -> Any:
        return self.get("value")

    @property
    def permissions(self) -> List[Permission]:
        return self.get("permissions", [])

    @property
    def can_create(self) -> bool:
        return self.get("can_create", False)

    @property
    def can_read(self) -> bool:
        return self.get("can_read", False)

    @property
    def can_update(self) -> bool:
        return self.get("can_update", False)

    @property
    def can_delete(self) -> bool:
        return self.get("can_delete", False)

    @property
    def path(self) -> str:
        return self[PATH_KEY]


# (field, new value) pair queued against an accessor
FieldUpdate = Tuple[Mapping[str, Any], Any]


def to_field_leaf(field: Mapping[str, Any]) -> Dict[str, Any]:
    """Derive the accessor view of one sanitized field."""
    permissions = permission_list(field[PERMISSIONS_KEY])
    return {
        "value": field[DATA_KEY],
        "permissions": permissions,
        "can_create": Permission.CREATE in permissions,
        "can_read": Permission.READ in permissions,
        "can_update": Permission.UPDATE in permissions,
        "can_delete": Permission.DELETE in permissions,
    }


def create_field_accessor(fields: Mapping[str, Any], parent_path: str = "") -> Dict[str, Any]:
    """Build a FieldLeaf tree from a sanitized response's ``data``."""
    return tag_paths(fields, is_sanitized_field, to_field_leaf, parent_path, node_type=FieldLeaf)


def build_update_payload(updates: Iterable[FieldUpdate]) -> Dict[str, Any]:
    """Turn ``(field, value)`` pairs into a nested partial update.

    Example:
        build_update_payload([(fields["profile"]["bio"], "hi")])
        # {"profile": {"bio": "hi"}}
    """
    payload: Dict[str, Any] = {}
    for leaf, value in updates:
        set_path(payload, leaf[PATH_KEY], value)
    return payload


def apply_updates_to_fields(fields: Mapping[str, Any], updates: Iterable[FieldUpdate]) -> Dict[str, Any]:
    """Return a copy of an accessor with the queued values written in."""
    updated = copy.deepcopy(dict(fields))
    for leaf, value in updates:
        target = get_path(updated, leaf[PATH_KEY])
        if isinstance(target, FieldLeaf):
            target["value"] = value
    return updated
