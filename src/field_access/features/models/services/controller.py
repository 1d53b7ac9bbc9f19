"""Controller orchestrating reads and validated updates of one model.

A ControllerInstance holds configuration only. Each call runs its own
chain of collaborator calls, so one instance can serve many concurrent
requests.

Read path:
    data -> roles -> role adjustment -> permission table -> merge
    -> permission override -> actions -> join -> sanitize

Update path:
    permissions for the current record -> validate the partial update
    -> persist -> read path over the updated record
"""

import inspect
import logging
from typing import Any, Dict, Generic, List, Mapping, Optional, TypeVar

from ....config.settings import ControllerConfig
from ....core.exceptions import PermissionDeniedError
from ....utils.tree import tree_join, tree_map
from ...permissions.entities import Permission
from ...permissions.services import (
    compute_default_permissions,
    ensure_permission_schema,
    resolve_field_permissions,
    validate_permission_schema,
)
from ..entities.model import Model
from ..entities.response import (
    PERMISSIONS_KEY,
    VALUE_KEY,
    FieldView,
    ModelComposite,
    ModelResponse,
    SanitizedField,
    is_field_view,
)
from .violations import ViolationCollector

logger = logging.getLogger(__name__)

ArgsT = TypeVar("ArgsT")


async def _resolve(result: Any) -> Any:
    """Await collaborator results that are awaitable."""
    if inspect.isawaitable(result):
        return await result
    return result


class ControllerInstance(Generic[ArgsT]):
    """Produces sanitized responses and validates updates for one model."""

    def __init__(self, model: Model, config: Optional[ControllerConfig] = None):
        self.model = model
        self.config = config or ControllerConfig()
        self.violation_collector = ViolationCollector(
            collect_all=self.config.collect_all_violations
        )

    async def handle_request(self, args: Optional[ArgsT] = None) -> ModelResponse:
        """Fetch the record and return it sanitized with per-field permissions.

        Args:
            args: Request arguments forwarded to every collaborator

        Returns:
            ModelResponse whose ``data`` mirrors the record's shape
        """
        data = await _resolve(self.model.get_data(args))
        return await self._respond(data, args)

    async def handle_update(
        self,
        update_data: Mapping[str, Any],
        args: Optional[ArgsT] = None,
    ) -> ModelResponse:
        """Validate a partial update, persist it and return the new response.

        Permissions are computed against the current record. Nothing is
        written unless every touched field passes.

        Raises:
            PermissionDeniedError: If any touched field lacks the required permission
        """
        current_data = await _resolve(self.model.get_data(args))
        roles = await self.handle_roles(current_data, args)
        applied_permissions = await self.handle_permissions(current_data, roles, args)

        try:
            self.violation_collector.validate(update_data, current_data, applied_permissions)
        except PermissionDeniedError as e:
            logger.warning(f"Rejected update with {len(e.violations)} violation(s): {e.message}")
            raise

        updated_data = await _resolve(self.model.update_data(update_data, args))
        logger.debug(f"Applied update to fields: {', '.join(update_data.keys())}")
        return await self._respond(updated_data, args)

    async def _respond(self, data: Dict[str, Any], args: Optional[ArgsT]) -> ModelResponse:
        roles = await self.handle_roles(data, args)
        applied_permissions = await self.handle_permissions(data, roles, args)
        actions = await self.handle_actions(data, applied_permissions, args)
        composite = self.create_model_composite(data, applied_permissions, actions)
        return self.sanitize(composite)

    async def handle_roles(self, data: Dict[str, Any], args: Optional[ArgsT] = None) -> List[Any]:
        """Fetch the client's roles and pass them through the role hook."""
        fetched_roles = await _resolve(self.model.get_client_roles(args))
        roles = await _resolve(self.model.apply_client_roles(data, list(fetched_roles), args))
        logger.debug(f"Resolved client roles: {roles}")
        return list(roles)

    async def handle_permissions(
        self,
        data: Dict[str, Any],
        roles: List[Any],
        args: Optional[ArgsT] = None,
    ) -> Dict[str, Any]:
        """Fetch the permission table, merge it for ``roles`` and apply overrides.

        Raises:
            SchemaMismatchError: In strict mode, if the table does not mirror ``data``
        """
        field_permissions = await _resolve(self.model.get_permissions(data, args))
        if self.config.strict_schema:
            ensure_permission_schema(data, field_permissions)
        else:
            mismatches = validate_permission_schema(data, field_permissions)
            if mismatches:
                logger.warning(
                    f"Permission table does not match data, granting nothing at: {', '.join(mismatches)}"
                )

        default_applied = compute_default_permissions(field_permissions, roles)
        logger.debug(f"Merged permissions for roles {roles}: {default_applied}")
        return await _resolve(
            self.model.apply_permissions(data, default_applied, roles, args)
        )

    async def handle_actions(
        self,
        data: Dict[str, Any],
        applied_permissions: Dict[str, Any],
        args: Optional[ArgsT] = None,
    ) -> List[Any]:
        """Fetch actions and pass them through the action filter."""
        actions = await _resolve(self.model.get_actions(args))
        applied_actions = await _resolve(
            self.model.apply_actions(data, applied_permissions, list(actions or []))
        )
        return list(applied_actions or [])

    def create_model_composite(
        self,
        data: Dict[str, Any],
        applied_permissions: Dict[str, Any],
        actions: List[Any],
    ) -> ModelComposite:
        """Pair each field's value with its permissions."""
        joined = tree_join(data, VALUE_KEY, applied_permissions, PERMISSIONS_KEY, node_type=FieldView)
        return ModelComposite(data=joined, actions=actions)

    def sanitize(self, composite: ModelComposite) -> ModelResponse:
        """Redact values the client may not read.

        Permissions are always disclosed in full, so a client can see that
        a field exists and what it could do with it.
        """
        def _sanitize_field(_key: str, field_view: FieldView) -> SanitizedField:
            permissions = resolve_field_permissions(field_view.permissions)
            readable = Permission.READ in permissions
            return SanitizedField(
                data=field_view.value if readable else None,
                permissions=permissions,
            )

        return ModelResponse(
            data=tree_map(composite.data, _sanitize_field, is_field_view),
            actions=composite.actions,
        )


class ModelInstance:
    """Wraps a Model and builds controllers for it."""

    def __init__(self, model: Any):
        self.model = model if isinstance(model, Model) else Model.from_object(model)

    def create_controller(self, config: Optional[ControllerConfig] = None) -> ControllerInstance:
        """Create a controller, using environment settings when no config is given."""
        return ControllerInstance(self.model, config or ControllerConfig.from_settings())
