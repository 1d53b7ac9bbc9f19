"""
Transport adapters for field-access.

- router_factories: FastAPI routes over a ControllerInstance
- exception_handlers: JSON error responses with HTTP status mapping
- client / session: httpx client and client-side editing session
"""

from .client import ModelAPIClient, resolve_headers
from .exception_handlers import register_exception_handlers
from .models import ModelResponseBody, UpdateRequest
from .router_factories import create_model_router, query_args
from .session import FieldSession, args_to_params

__all__ = [
    "ModelAPIClient",
    "resolve_headers",
    "register_exception_handlers",
    "ModelResponseBody",
    "UpdateRequest",
    "create_model_router",
    "query_args",
    "FieldSession",
    "args_to_params",
]
