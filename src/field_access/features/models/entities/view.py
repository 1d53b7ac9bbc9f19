"""Client-facing description of a model: where it lives and how to edit it."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class EndpointRequest(BaseModel):
    """One HTTP method of a model endpoint.

    ``url`` and ``headers`` override the values on ModelEndpoints.
    """

    url: Optional[str] = None
    headers: Optional[Dict[str, str]] = None
    params: Optional[List[str]] = Field(
        default=None,
        description="Argument names forwarded as query parameters (all when unset)",
    )


class ModelEndpoints(BaseModel):
    """Endpoints through which clients reach a model."""

    url: Optional[str] = None
    headers: Optional[Dict[str, str]] = None
    get: EndpointRequest = Field(default_factory=EndpointRequest)
    patch: EndpointRequest = Field(default_factory=EndpointRequest)
    post: Optional[EndpointRequest] = None
    put: Optional[EndpointRequest] = None
    delete: Optional[EndpointRequest] = None

    def url_for(self, method: str) -> Optional[str]:
        """Resolve the URL for an HTTP method, falling back to the base URL."""
        request = getattr(self, method.lower(), None)
        if request is not None and request.url:
            return request.url
        return self.url


class ViewConfig(BaseModel):
    """Client behaviour when editing a model."""

    optimistic_updates: bool = Field(
        default=True,
        description="Apply edits locally before the server confirms them",
    )
    enforce_client_permissions: bool = Field(
        default=False,
        description="Block edits the client already knows it may not make",
    )
