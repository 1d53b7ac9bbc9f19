"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .domain import (
    ConfigurationError,
    InvalidShorthandError,
    SchemaMismatchError,
    AuthorizationError,
    PermissionDeniedError,
    ModelRequestError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 403 Forbidden
    AuthorizationError: 403,
    PermissionDeniedError: 403,

    # 500 Internal Server Error
    ConfigurationError: 500,
    InvalidShorthandError: 500,
    SchemaMismatchError: 500,

    # 502 Bad Gateway
    ModelRequestError: 502,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Walks the exception's MRO so subclasses without an explicit entry
    inherit the status of their closest mapped ancestor.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code (500 for anything unmapped)
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
