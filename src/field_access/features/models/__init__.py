"""Models feature for field-access.

- entities/: model definitions, responses, field accessor, client view
- services/: the controller and update validation
"""

from .entities import (
    Model, ModelController,
    FieldView, SanitizedField, ModelComposite, ModelResponse,
    FieldLeaf, FieldUpdate, create_field_accessor, build_update_payload,
    EndpointRequest, ModelEndpoints, ViewConfig,
)
from .services import ControllerInstance, ModelInstance, ViolationCollector

__all__ = [
    # Entities
    "Model",
    "ModelController",
    "FieldView",
    "SanitizedField",
    "ModelComposite",
    "ModelResponse",
    "FieldLeaf",
    "FieldUpdate",
    "create_field_accessor",
    "build_update_payload",
    "EndpointRequest",
    "ModelEndpoints",
    "ViewConfig",

    # Services
    "ControllerInstance",
    "ModelInstance",
    "ViolationCollector",
]
