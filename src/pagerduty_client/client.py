"""
Main PagerDuty API client.

This module provides the PagerDutyClient class, the primary entry point
for talking to the PagerDuty REST API. It owns the HTTP client and hands
it to the resource clients.
"""

from typing import Any, Dict, Optional
import logging

from pagerduty_client.config import ClientConfig
from pagerduty_client.endpoints import ExtensionsClient
from pagerduty_client.http import DEFAULT_BASE_URL, AsyncHTTPClient, TokenAuthProvider

logger = logging.getLogger(__name__)


class PagerDutyClient:
    """
    Main client for the PagerDuty API.

    Example usage:
        ```python
        async with PagerDutyClient(api_token="u+abc") as client:
            page = await client.extensions.list(ListExtensionOptions(query="webhook"))
            extension = await client.extensions.get("PJFWPEP")
        ```

    Or without context manager:
        ```python
        client = PagerDutyClient.from_config(ClientConfig.from_env())
        # ... use client ...
        await client.close()
        ```
    """

    def __init__(
        self,
        api_token: Optional[str] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        token_type: str = "token",
        from_email: Optional[str] = None,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize the PagerDuty client.

        Args:
            api_token: REST API key, or OAuth access token with token_type="bearer"
            base_url: Base URL for the API
            token_type: "token" for API keys, "bearer" for OAuth tokens
            from_email: Email of the acting user (required by some write calls)
            timeout: Default request timeout in seconds
            headers: Additional headers to include in all requests
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

        self._auth_provider = TokenAuthProvider(
            access_token=api_token,
            token_type=token_type,
        )

        self._http = AsyncHTTPClient(
            base_url=self._base_url,
            auth_provider=self._auth_provider,
            timeout=timeout,
            headers=headers,
            from_email=from_email,
        )

        # Endpoint clients (lazy-loaded)
        self._endpoint_clients: Dict[str, Any] = {}

    @classmethod
    def from_config(cls, config: ClientConfig) -> "PagerDutyClient":
        """Create a client from a ClientConfig."""
        return cls(
            config.api_token,
            base_url=config.api_url,
            token_type=config.token_type,
            from_email=config.from_email,
            timeout=config.timeout,
            headers=config.headers,
        )

    @property
    def base_url(self) -> str:
        """Get the base URL for the API."""
        return self._base_url

    @property
    def is_authenticated(self) -> bool:
        """Check if an API token is configured."""
        return self._auth_provider.is_authenticated()

    @property
    def http(self) -> AsyncHTTPClient:
        """Get the underlying HTTP client for custom requests."""
        return self._http

    @property
    def extensions(self) -> ExtensionsClient:
        """Client for /extensions."""
        if "extensions" not in self._endpoint_clients:
            self._endpoint_clients["extensions"] = ExtensionsClient(self._http)
        return self._endpoint_clients["extensions"]

    # =========================================================================
    # Lifecycle Management
    # =========================================================================

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()
        self._endpoint_clients.clear()
        logger.debug("Client closed")

    async def __aenter__(self) -> "PagerDutyClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    def __repr__(self) -> str:
        auth_status = "authenticated" if self.is_authenticated else "not authenticated"
        return f"PagerDutyClient(base_url={self._base_url!r}, {auth_status})"
