"""
Client-side editing session over a model.

Loads a sanitized response into a path-addressable accessor, buffers
field edits and flushes them as one partial update.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from ..features.models.entities import (
    FieldUpdate,
    ModelEndpoints,
    ViewConfig,
    apply_updates_to_fields,
    build_update_payload,
    create_field_accessor,
)
from ..utils.tree import PATH_KEY
from .client import HeadersInput, ModelAPIClient

logger = logging.getLogger(__name__)


def args_to_params(args: Any, allowed: Optional[List[str]] = None) -> Dict[str, str]:
    """Turn request args into query parameters, skipping unset values."""
    if args is None:
        return {}
    if hasattr(args, "model_dump"):
        values = args.model_dump()
    elif isinstance(args, Mapping):
        values = dict(args)
    else:
        values = vars(args)
    return {
        key: str(value)
        for key, value in values.items()
        if value is not None and (allowed is None or key in allowed)
    }


class FieldSession:
    """Holds one model's accessor, pending edits and last error."""

    def __init__(
        self,
        endpoints: ModelEndpoints,
        client: ModelAPIClient,
        config: Optional[ViewConfig] = None,
        headers: HeadersInput = None,
    ):
        self.endpoints = endpoints
        self.client = client
        self.config = config or ViewConfig()
        self.headers = headers
        self.args: Any = None
        self.response: Optional[Dict[str, Any]] = None
        self.fields: Optional[Dict[str, Any]] = None
        self.actions: List[Any] = []
        self.error: Optional[Exception] = None
        self._pending: List[FieldUpdate] = []

    @property
    def pending(self) -> List[FieldUpdate]:
        """Edits queued since the last flush."""
        return list(self._pending)

    async def load(self, args: Any = None) -> Dict[str, Any]:
        """Fetch the model and rebuild the accessor.

        Raises:
            ValueError: If no GET URL is configured
            ModelRequestError: If the server rejects the request
        """
        self.args = args
        url = self.endpoints.url_for("get")
        if not url:
            raise ValueError("No URL defined in view endpoints")

        params = args_to_params(args, self.endpoints.get.params)
        try:
            result = await self.client.get(url, params=params, headers=self._headers_for("get"))
        except Exception as e:
            self.error = e
            raise
        self._apply_response(result)
        return self.fields

    def update(self, *updates: FieldUpdate) -> bool:
        """Queue field edits; the latest edit per path wins.

        With client permission enforcement, a batch containing any field
        the client may not update is dropped entirely.

        Returns:
            True if the edits were queued
        """
        if self.config.enforce_client_permissions:
            for leaf, _value in updates:
                if not leaf.get("can_update", False):
                    logger.warning(f"Update blocked: no update permission for {leaf[PATH_KEY]}")
                    return False

        if self.config.optimistic_updates and self.fields is not None:
            self.fields = apply_updates_to_fields(self.fields, updates)

        for update in updates:
            path = update[0][PATH_KEY]
            for index, (queued, _value) in enumerate(self._pending):
                if queued[PATH_KEY] == path:
                    self._pending[index] = update
                    break
            else:
                self._pending.append(update)
        return True

    async def flush(self) -> None:
        """Send queued edits as one partial update.

        On failure the accessor is restored to its pre-flush state and the
        error is re-raised.

        Raises:
            ValueError: If no PATCH URL is configured
            ModelRequestError: If the server rejects the update
        """
        if not self._pending:
            return

        url = self.endpoints.url_for("patch")
        if not url:
            raise ValueError("No URL defined in view endpoints for PATCH")

        snapshot = self.fields
        payload = build_update_payload(self._pending)
        self._pending = []

        try:
            result = await self.client.patch(
                url,
                payload,
                params=args_to_params(self.args),
                headers=self._headers_for("patch"),
            )
        except Exception as e:
            self.fields = snapshot
            self.error = e
            raise
        self._apply_response(result)

    def _headers_for(self, method: str) -> HeadersInput:
        if self.headers is not None:
            return self.headers
        request = getattr(self.endpoints, method)
        return (request.headers if request is not None else None) or self.endpoints.headers

    def _apply_response(self, result: Dict[str, Any]) -> None:
        self.response = result
        if result.get("data") is not None:
            self.fields = create_field_accessor(result["data"])
        self.actions = result.get("actions") or []
        self.error = None
