"""Update validation against computed field permissions.

A partial update is a sparse patch: only keys present in the update are
checked. Each changed leaf is classified by its null transition:

- value -> None requires delete
- None/absent -> value requires create
- anything else requires update
"""

import logging
from typing import Any, List, Mapping

from ....core.exceptions import PermissionDeniedError
from ....utils.tree import is_structure, join_path
from ...permissions.entities import Permission
from ...permissions.services import resolve_field_permissions

logger = logging.getLogger(__name__)


def required_permission(new_value: Any, current_value: Any) -> Permission:
    """Classify an edit by the permission it needs."""
    if new_value is None and current_value is not None:
        return Permission.DELETE
    if new_value is not None and current_value is None:
        return Permission.CREATE
    return Permission.UPDATE


class ViolationCollector:
    """Walks a partial update and collects the paths it may not change.

    With ``collect_all`` every violation is gathered before raising once;
    otherwise the walk stops at the first one.
    """

    def __init__(self, collect_all: bool = True):
        self.collect_all = collect_all

    def validate(
        self,
        update_data: Mapping[str, Any],
        current_data: Mapping[str, Any],
        applied_permissions: Mapping[str, Any],
    ) -> None:
        """Raise if the update touches any field it may not change.

        Raises:
            PermissionDeniedError: Carrying every violating path in walk order
        """
        violations = self.collect(update_data, current_data, applied_permissions)
        if violations:
            raise PermissionDeniedError(violations)

    def collect(
        self,
        update_data: Mapping[str, Any],
        current_data: Mapping[str, Any],
        applied_permissions: Mapping[str, Any],
    ) -> List[str]:
        """Return every violating path (raises on the first in fail-fast mode)."""
        violations: List[str] = []
        self._walk(update_data, current_data, applied_permissions, "", violations)
        return violations

    def _walk(
        self,
        update_data: Mapping[str, Any],
        current_data: Any,
        applied_permissions: Any,
        parent_path: str,
        violations: List[str],
    ) -> None:
        for key, new_value in update_data.items():
            current_path = join_path(parent_path, key)
            current_value = current_data.get(key) if is_structure(current_data) else None

            if not is_structure(applied_permissions) or key not in applied_permissions:
                logger.debug(f"No permissions for '{current_path}'")
                self._record(current_path, violations)
                continue

            field_permissions = applied_permissions[key]
            if is_structure(new_value) and is_structure(field_permissions):
                self._walk(new_value, current_value, field_permissions, current_path, violations)
                continue

            required = required_permission(new_value, current_value)
            if required not in resolve_field_permissions(field_permissions):
                logger.debug(f"'{current_path}' requires {required.value} permission")
                self._record(current_path, violations)

    def _record(self, path: str, violations: List[str]) -> None:
        if not self.collect_all:
            raise PermissionDeniedError([path])
        violations.append(path)
