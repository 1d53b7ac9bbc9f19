"""Response entities produced by the controller.

FieldView and SanitizedField are ``dict`` subclasses: they serialize as
plain JSON objects but stay distinguishable from record structure while
the controller walks its trees.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Mapping, TypeVar

ActionT = TypeVar("ActionT")

VALUE_KEY = "value"
DATA_KEY = "data"
PERMISSIONS_KEY = "permissions"


class FieldView(dict):
    """A field's raw value paired with its resolved permissions."""

    @property
    def value(self) -> Any:
        return self.get(VALUE_KEY)

    @property
    def permissions(self) -> Any:
        return self.get(PERMISSIONS_KEY)


class SanitizedField(dict):
    """A FieldView after read enforcement.

    ``data`` is redacted to ``None`` without read permission while
    ``permissions`` is always reported in full.
    """

    @property
    def data(self) -> Any:
        return self.get(DATA_KEY)

    @property
    def permissions(self) -> List[Any]:
        return self.get(PERMISSIONS_KEY, [])


def is_field_view(value: Any) -> bool:
    """Return True for FieldView nodes."""
    return isinstance(value, FieldView)


def is_sanitized_field(value: Any) -> bool:
    """Return True for ``{data, permissions}`` nodes, typed or decoded from JSON."""
    return isinstance(value, Mapping) and DATA_KEY in value and PERMISSIONS_KEY in value


@dataclass
class ModelComposite(Generic[ActionT]):
    """Data joined with permissions, before sanitization."""

    data: Dict[str, Any]
    actions: List[ActionT] = field(default_factory=list)


@dataclass
class ModelResponse(Generic[ActionT]):
    """Sanitized, permission-annotated response for one record."""

    data: Dict[str, Any]
    actions: List[ActionT] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {"data": self.data, "actions": list(self.actions)}
