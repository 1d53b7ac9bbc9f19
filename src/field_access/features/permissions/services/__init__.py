"""Permission services package."""

# Imported before .codec so the ``merge`` submodule does not shadow codec.merge
from .merge import compute_default_permissions, merge_role_permissions, resolve_field_permissions
from .codec import (
    coerce_permission,
    to_flags,
    from_flags,
    to_shorthand,
    parse_shorthand,
    expand,
    permission_list,
    merge,
)
from .schema import validate_permission_schema, ensure_permission_schema

__all__ = [
    # Codec
    "coerce_permission",
    "to_flags",
    "from_flags",
    "to_shorthand",
    "parse_shorthand",
    "expand",
    "permission_list",
    "merge",

    # Merge
    "compute_default_permissions",
    "merge_role_permissions",
    "resolve_field_permissions",

    # Schema
    "validate_permission_schema",
    "ensure_permission_schema",
]
