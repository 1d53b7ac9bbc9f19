"""Model services package."""

from .controller import ControllerInstance, ModelInstance
from .violations import ViolationCollector, required_permission

__all__ = [
    "ControllerInstance",
    "ModelInstance",
    "ViolationCollector",
    "required_permission",
]
