"""Collaborator contracts consumed by the controller.

Every method may be a plain function or a coroutine function; the
controller awaits whatever comes back if it is awaitable. Only the four
methods below are required; the optional hooks are described on Model.
"""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class ModelController(Protocol):
    """Protocol for objects that supply a model's data, roles and permissions."""

    def get_data(self, args: Optional[Any] = None) -> Any:
        """Fetch the full record from storage."""
        ...

    def get_client_roles(self, args: Optional[Any] = None) -> Any:
        """Fetch every role the requesting client holds."""
        ...

    def get_permissions(self, data: Dict[str, Any], args: Optional[Any] = None) -> Any:
        """Fetch the FieldPermissions tree, optionally depending on the record."""
        ...

    def update_data(self, data: Dict[str, Any], args: Optional[Any] = None) -> Any:
        """Persist a partial update and return the complete record."""
        ...

