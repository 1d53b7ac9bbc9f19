"""Request and response bodies for model endpoints."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class UpdateRequest(BaseModel):
    """Body of a partial update: ``{"data": {...}}``."""

    data: Dict[str, Any] = Field(..., description="Sparse patch of the record")


class ModelResponseBody(BaseModel):
    """Sanitized record and the actions available to the client."""

    data: Dict[str, Any]
    actions: List[Any] = Field(default_factory=list)
