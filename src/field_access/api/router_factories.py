"""
Router factory for exposing a model controller over HTTP.

The router is a thin adapter: GET runs the read path and PATCH runs the
validated update path. Status mapping is left to the registered
exception handlers.
"""
import logging
from typing import Any, Callable, Dict, List, Optional

from fastapi import APIRouter, Depends, Request

from ..features.models import ControllerInstance
from .models import ModelResponseBody, UpdateRequest

logger = logging.getLogger(__name__)


def query_args(request: Request) -> Dict[str, Any]:
    """Default args dependency: the request's query parameters."""
    return dict(request.query_params)


def create_model_router(
    controller: ControllerInstance,
    prefix: str,
    args_dependency: Optional[Callable[..., Any]] = None,
    tags: Optional[List[str]] = None,
    **kwargs
) -> APIRouter:
    """
    Create a router serving one model.

    Args:
        controller: Controller handling reads and updates
        prefix: Route prefix, e.g. ``/api/user``
        args_dependency: FastAPI dependency producing the collaborator args
            (defaults to the query parameters)
        tags: OpenAPI tags
        **kwargs: Additional router arguments

    Returns:
        Router with ``GET {prefix}`` and ``PATCH {prefix}``
    """
    router = APIRouter(prefix=prefix, tags=tags or ["models"], **kwargs)
    args_dependency = args_dependency or query_args

    @router.get("", response_model=ModelResponseBody)
    async def read_model(args: Any = Depends(args_dependency)):
        """Return the sanitized record with per-field permissions."""
        response = await controller.handle_request(args)
        return response.to_dict()

    @router.patch("", response_model=ModelResponseBody)
    async def update_model(body: UpdateRequest, args: Any = Depends(args_dependency)):
        """Validate and apply a partial update."""
        response = await controller.handle_update(body.data, args)
        return response.to_dict()

    logger.debug(f"Registered model routes at {prefix}")
    return router
