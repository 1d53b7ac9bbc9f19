"""Field-Access - field-level permission resolution and update validation.

This library computes, for a record and the roles of a requesting client,
what the client may create, read, update and delete on every field, returns
the record with unreadable values redacted, and rejects partial updates that
touch fields the client may not change.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

# Configuration
from .config import (
    FieldAccessSettings,
    ControllerConfig,
    get_settings,
)

from .core.exceptions import (
    # Base Exception
    FieldAccessError,

    # Domain Exceptions
    ConfigurationError,
    InvalidShorthandError,
    SchemaMismatchError,
    AuthorizationError,
    PermissionDeniedError,
    ModelRequestError,

    # Utility Functions
    get_http_status_code,
    create_error_response,
)

# Tree transforms
from .utils import (
    tree_map,
    tree_join,
    tag_paths,
)

# Permissions feature
from .features.permissions import (
    Permission,
    PermissionShorthand,
    FULL_ACCESS,
    NO_ACCESS,
    RolePermissionsMap,
    new_role_permissions_map,
    apply_single_role_permissions_map,
    update_permission_field,
    update_role_permission,
    to_shorthand,
    parse_shorthand,
    expand,
    merge,
    compute_default_permissions,
)

# Models feature
from .features.models import (
    Model,
    ModelController,
    ModelResponse,
    FieldLeaf,
    create_field_accessor,
    build_update_payload,
    ModelEndpoints,
    ViewConfig,
    ControllerInstance,
    ModelInstance,
)

__all__ = [
    "__version__",

    # Configuration
    "FieldAccessSettings",
    "ControllerConfig",
    "get_settings",
    "setup_logging",

    # Exceptions
    "FieldAccessError",
    "ConfigurationError",
    "InvalidShorthandError",
    "SchemaMismatchError",
    "AuthorizationError",
    "PermissionDeniedError",
    "ModelRequestError",
    "get_http_status_code",
    "create_error_response",

    # Tree transforms
    "tree_map",
    "tree_join",
    "tag_paths",

    # Permissions
    "Permission",
    "PermissionShorthand",
    "FULL_ACCESS",
    "NO_ACCESS",
    "RolePermissionsMap",
    "new_role_permissions_map",
    "apply_single_role_permissions_map",
    "update_permission_field",
    "update_role_permission",
    "to_shorthand",
    "parse_shorthand",
    "expand",
    "merge",
    "compute_default_permissions",

    # Models
    "Model",
    "ModelController",
    "ModelResponse",
    "FieldLeaf",
    "create_field_accessor",
    "build_update_payload",
    "ModelEndpoints",
    "ViewConfig",
    "ControllerInstance",
    "ModelInstance",
]
