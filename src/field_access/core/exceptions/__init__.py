"""Exceptions module for field-access.

This module provides the complete exception hierarchy for field-access.
"""

from .base import (
    FieldAccessError,
    get_http_status_code,
    create_error_response,
)

from .domain import (
    # Configuration Errors
    ConfigurationError,
    InvalidShorthandError,
    SchemaMismatchError,

    # Authorization Errors
    AuthorizationError,
    PermissionDeniedError,

    # Transport Errors
    ModelRequestError,
)

from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    # Base
    "FieldAccessError",
    "get_http_status_code",
    "create_error_response",
    "HTTP_STATUS_MAP",

    # Configuration Errors
    "ConfigurationError",
    "InvalidShorthandError",
    "SchemaMismatchError",

    # Authorization Errors
    "AuthorizationError",
    "PermissionDeniedError",

    # Transport Errors
    "ModelRequestError",
]
