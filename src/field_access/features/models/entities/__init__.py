"""Model entities package."""

from .model import (
    Model,
    keep_client_roles,
    keep_applied_permissions,
    no_actions,
    keep_actions,
)
from .protocols import ModelController
from .response import (
    FieldView,
    SanitizedField,
    ModelComposite,
    ModelResponse,
    is_field_view,
    is_sanitized_field,
)
from .field_leaf import (
    FieldLeaf,
    FieldUpdate,
    to_field_leaf,
    create_field_accessor,
    build_update_payload,
    apply_updates_to_fields,
)
from .view import EndpointRequest, ModelEndpoints, ViewConfig

__all__ = [
    # Model
    "Model",
    "ModelController",
    "keep_client_roles",
    "keep_applied_permissions",
    "no_actions",
    "keep_actions",

    # Responses
    "FieldView",
    "SanitizedField",
    "ModelComposite",
    "ModelResponse",
    "is_field_view",
    "is_sanitized_field",

    # Field accessor
    "FieldLeaf",
    "FieldUpdate",
    "to_field_leaf",
    "create_field_accessor",
    "build_update_payload",
    "apply_updates_to_fields",

    # View
    "EndpointRequest",
    "ModelEndpoints",
    "ViewConfig",
]
