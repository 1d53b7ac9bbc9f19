"""Model definition: the collaborator slots a controller drives.

Optional hooks default to identity functions so the controller can call
every slot unconditionally.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .view import ModelEndpoints, ViewConfig


def keep_client_roles(data: Dict[str, Any], roles: List[Any], args: Optional[Any] = None) -> List[Any]:
    """Default role adjustment: use the fetched roles unchanged."""
    return roles


def keep_applied_permissions(
    data: Dict[str, Any],
    applied_permissions: Dict[str, Any],
    roles: List[Any],
    args: Optional[Any] = None,
) -> Dict[str, Any]:
    """Default permission override: keep the role-merged permissions."""
    return applied_permissions


def no_actions(args: Optional[Any] = None) -> List[Any]:
    """Default action supply: no actions."""
    return []


def keep_actions(data: Dict[str, Any], applied_permissions: Dict[str, Any], actions: List[Any]) -> List[Any]:
    """Default action filter: pass actions through."""
    return actions


OPTIONAL_HOOKS: Dict[str, Callable[..., Any]] = {
    "apply_client_roles": keep_client_roles,
    "apply_permissions": keep_applied_permissions,
    "get_actions": no_actions,
    "apply_actions": keep_actions,
}

REQUIRED_SLOTS = ("get_data", "get_client_roles", "get_permissions", "update_data")


@dataclass
class Model:
    """Collaborators and client description for one kind of record.

    Attributes:
        get_data: ``(args) -> Data``; fetch the full record
        get_client_roles: ``(args) -> [Role]``; roles of the requesting client
        get_permissions: ``(data, args) -> FieldPermissions``
        update_data: ``(partial, args) -> Data``; persist and return the full record
        apply_client_roles: ``(data, roles, args) -> [Role]``; adjust roles
            using the fetched record, e.g. to grant an owner role
        apply_permissions: ``(data, applied, roles, args) -> AppliedPermissions``;
            override merged permissions per field
        get_actions: ``(args) -> [Action]``
        apply_actions: ``(data, applied, actions) -> [Action]``; filter actions
        endpoints: Where clients reach this model
        view_config: How clients edit this model
    """

    get_data: Callable[..., Any]
    get_client_roles: Callable[..., Any]
    get_permissions: Callable[..., Any]
    update_data: Callable[..., Any]
    apply_client_roles: Callable[..., Any] = keep_client_roles
    apply_permissions: Callable[..., Any] = keep_applied_permissions
    get_actions: Callable[..., Any] = no_actions
    apply_actions: Callable[..., Any] = keep_actions
    endpoints: Optional[ModelEndpoints] = None
    view_config: ViewConfig = field(default_factory=ViewConfig)

    def __post_init__(self):
        """Fill unset optional hooks with their identity defaults."""
        for name, default in OPTIONAL_HOOKS.items():
            if getattr(self, name) is None:
                setattr(self, name, default)

    @classmethod
    def from_object(cls, source: Any) -> "Model":
        """Build a Model from any object exposing the collaborator methods.

        Raises:
            TypeError: If a required collaborator is missing
        """
        missing = [name for name in REQUIRED_SLOTS if not callable(getattr(source, name, None))]
        if missing:
            raise TypeError(f"{type(source).__name__} is missing model collaborators: {', '.join(missing)}")

        hooks = {name: getattr(source, name, None) for name in OPTIONAL_HOOKS}
        endpoints = getattr(source, "endpoints", None)
        view_config = getattr(source, "view_config", None)
        return cls(
            **{name: getattr(source, name) for name in REQUIRED_SLOTS},
            **hooks,
            endpoints=endpoints,
            view_config=view_config or ViewConfig(),
        )
