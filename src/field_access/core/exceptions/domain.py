"""Domain exceptions for field-access.

Organized by concern: configuration mistakes made by the application that
embeds the engine, authorization failures raised while validating updates,
and transport failures raised by the HTTP client.
"""

from typing import Any, Dict, List, Optional

from .base import FieldAccessError


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigurationError(FieldAccessError):
    """Base class for configuration-related errors."""
    pass


class InvalidShorthandError(ConfigurationError):
    """Raised when a permission shorthand or permission name cannot be decoded."""

    def __init__(self, value: Any, invalid: Any):
        super().__init__(
            f"Invalid permission {invalid!r} in {value!r}",
            details={"value": str(value), "invalid": str(invalid)},
        )
        self.value = value
        self.invalid = invalid


class SchemaMismatchError(ConfigurationError):
    """Raised when a permission table is not isomorphic to the data it guards."""

    def __init__(self, paths: List[str]):
        super().__init__(
            f"Permission schema does not match data: {', '.join(paths)}",
            details={"paths": list(paths)},
        )
        self.paths = list(paths)


# ============================================================================
# Authorization Errors
# ============================================================================

class AuthorizationError(FieldAccessError):
    """Base class for authorization-related errors."""
    pass


class PermissionDeniedError(AuthorizationError):
    """Raised when a proposed update touches fields the client may not change.

    Carries the ordered list of dotted paths that failed validation.
    """

    def __init__(self, violations: List[str], details: Optional[Dict[str, Any]] = None):
        violations = list(violations)
        super().__init__(
            f"Permission denied: {', '.join(violations)}",
            details={"violations": violations, **(details or {})},
        )
        self.violations = violations


# ============================================================================
# Transport Errors
# ============================================================================

class ModelRequestError(FieldAccessError):
    """Raised by the HTTP client when the server answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"{status_code}: {body}",
            details={"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body
