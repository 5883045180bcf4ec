"""
Async HTTP client for the PagerDuty REST API.

This module provides the transport every endpoint client shares, built on
httpx with:
- API key or OAuth token authentication
- PagerDuty v2 content negotiation headers
- Request logging
- Mapping of error responses to client exceptions
- Per-request timeout overrides

It performs exactly one round trip per call: there is no retry, backoff
or token refresh.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union
import logging

import httpx
from pydantic import BaseModel

from pagerduty_client.exceptions import (
    NetworkError,
    RateLimitError,
    ConnectionError as ClientConnectionError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.pagerduty.com"
ACCEPT_HEADER = "application/vnd.pagerduty+json;version=2"


class AuthProvider(ABC):
    """Abstract base class for authentication providers."""

    @abstractmethod
    async def get_access_token(self) -> Optional[str]:
        """Get the current access token."""
        ...

    @abstractmethod
    def authorization_header(self, token: str) -> str:
        """Format the Authorization header value for a token."""
        ...

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check if a token is configured."""
        ...


class TokenAuthProvider(AuthProvider):
    """
    Static token provider.

    ``token_type="token"`` formats REST API keys (``Token token=<key>``);
    ``token_type="bearer"`` formats OAuth access tokens (``Bearer <token>``).
    """

    TOKEN_TYPES = ("token", "bearer")

    def __init__(
        self,
        access_token: Optional[str] = None,
        token_type: str = "token",
    ):
        if token_type not in self.TOKEN_TYPES:
            raise ValueError(f"Unsupported token type: {token_type!r}")
        self._access_token = access_token
        self.token_type = token_type

    async def get_access_token(self) -> Optional[str]:
        return self._access_token

    def authorization_header(self, token: str) -> str:
        if self.token_type == "bearer":
            return f"Bearer {token}"
        return f"Token token={token}"

    def is_authenticated(self) -> bool:
        return self._access_token is not None


class AsyncHTTPClient:
    """
    Async HTTP client for PagerDuty API requests.

    This client handles:
    - Base URL management
    - Authentication header injection
    - Response error handling

    Successful responses are returned unparsed; decoding is left to the
    endpoint clients.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        auth_provider: Optional[AuthProvider] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        from_email: Optional[str] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            base_url: Base URL for the API (e.g., "https://api.pagerduty.com")
            auth_provider: Authentication provider for token management
            timeout: Default request timeout in seconds
            headers: Additional headers to include in all requests
            from_email: Email of the acting user, sent as the ``From`` header
        """
        self.base_url = base_url.rstrip("/")
        self.auth_provider = auth_provider or TokenAuthProvider()
        self.timeout = timeout
        self.from_email = from_email
        self._default_headers = headers or {}
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self) -> Dict[str, str]:
        """Build request headers without authentication."""
        headers = {
            "Content-Type": "application/json",
            "Accept": ACCEPT_HEADER,
            **self._default_headers,
        }
        if self.from_email:
            headers["From"] = self.from_email
        return headers

    async def _add_auth_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Add authentication header if available."""
        if self.auth_provider and self.auth_provider.is_authenticated():
            token = await self.auth_provider.get_access_token()
            if token:
                headers["Authorization"] = self.auth_provider.authorization_header(token)
        return headers

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Convert HTTP error responses to appropriate exceptions."""
        status_code = response.status_code

        # PagerDuty error bodies look like {"error": {"message", "code", "errors"}}
        details: Dict[str, Any] = {}
        error_code = None
        try:
            error_data = response.json()
            error = error_data.get("error") if isinstance(error_data, dict) else None
            if isinstance(error, dict):
                detail = error.get("message") or str(error)
                error_code = error.get("code")
                if error.get("errors"):
                    details["errors"] = error["errors"]
            else:
                detail = str(error_data)
        except Exception:
            logger.warning(f"Could not parse error body for HTTP {status_code}")
            detail = response.text or f"HTTP {status_code}"

        if status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                detail,
                status_code=status_code,
                error_code=error_code,
                details=details,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        raise exception_from_response(status_code, detail, error_code=error_code, details=details)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """
        Make an HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: Request path (will be joined with base_url)
            params: Query parameters
            json_data: JSON body data (can be dict or Pydantic model)
            timeout: Timeout override in seconds for this request

        Returns:
            httpx.Response object

        Raises:
            PagerDutyClientError: On non-2xx responses
            NetworkError: On connection failures
            TimeoutError: On request timeout
        """
        client = await self._get_client()

        request_headers = await self._add_auth_header(self._build_headers())

        # Handle Pydantic models in json_data
        if json_data is not None and isinstance(json_data, BaseModel):
            json_data = json_data.model_dump(mode="json", by_alias=True, exclude_unset=True)

        # Clean query params
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        logger.debug(f"{method} {path}")

        try:
            response = await client.request(
                method=method,
                url=path,
                params=params,
                json=json_data,
                headers=request_headers,
                timeout=httpx.Timeout(timeout) if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Request timed out: {e}") from e
        except httpx.ConnectError as e:
            raise ClientConnectionError(f"Connection failed: {e}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {e}") from e

        if not response.is_success:
            self._handle_error_response(response)
        return response

    async def get(
        self,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """Make a GET request."""
        return await self._request("GET", path, params=params, timeout=timeout)

    async def post(
        self,
        path: str,
        *,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """Make a POST request."""
        return await self._request("POST", path, json_data=json_data, timeout=timeout)

    async def put(
        self,
        path: str,
        *,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """Make a PUT request."""
        return await self._request("PUT", path, json_data=json_data, timeout=timeout)

    async def delete(
        self,
        path: str,
        *,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """Make a DELETE request."""
        return await self._request("DELETE", path, timeout=timeout)
