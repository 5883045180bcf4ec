"""
Base class for typed endpoint clients.

Provides path building, query serialization and response decoding shared
by the resource clients in ``pagerduty_client.endpoints``.
"""

from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from pagerduty_client.exceptions import ResponseDecodeError
from pagerduty_client.http import AsyncHTTPClient

T = TypeVar("T", bound=BaseModel)


class BaseEndpointClient:
    """
    Base class for all endpoint clients.

    Holds no state besides the shared HTTP client, so one instance can be
    used from concurrent tasks.
    """

    def __init__(
        self,
        http_client: AsyncHTTPClient,
        base_path: str,
    ):
        """
        Initialize the endpoint client.

        Args:
            http_client: The underlying HTTP client
            base_path: Base path for this endpoint (e.g., "/extensions")
        """
        self._http = http_client
        self._base_path = base_path.rstrip("/")

    @property
    def base_path(self) -> str:
        """Get the base path for this endpoint."""
        return self._base_path

    def _build_path(self, *parts: str) -> str:
        """Build a path from the base path and additional parts."""
        clean_parts = [p.strip("/") for p in parts if p]
        if clean_parts:
            return f"{self._base_path}/{'/'.join(clean_parts)}"
        return self._base_path

    def _query_to_params(self, query: Optional[BaseModel]) -> Optional[Dict[str, Any]]:
        """
        Convert a query model to request parameters.

        Empty strings, zeros and False are dropped along with None, so only
        filters the caller actually set reach the query string.
        """
        if query is None:
            return None
        params = query.model_dump(mode="json", by_alias=True, exclude_none=True)
        return {k: v for k, v in params.items() if v not in ("", 0, False)}

    def _decode(self, response: httpx.Response, model: Type[T]) -> T:
        """Decode a JSON response body into ``model``."""
        try:
            return model.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            raise ResponseDecodeError(f"Could not decode JSON response: {e}") from e
