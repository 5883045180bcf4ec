"""
PagerDuty Client Library.

A typed async HTTP client for the PagerDuty REST API.

Example usage:
    ```python
    from pagerduty_client import PagerDutyClient
    from pagerduty_types import Extension, APIObject

    async with PagerDutyClient(api_token="u+abc") as client:
        # List resources
        page = await client.extensions.list()

        # Create a resource
        extension = await client.extensions.create(Extension(
            name="Webhook",
            endpoint_url="https://example.com/hook",
            extension_schema=APIObject(id="PJFWPEP", type="extension_schema_reference"),
            extension_objects=[APIObject(id="PIJ90N7", type="service_reference")],
            config={"notify_types": {"resolve": True}},
        ))

        # Delete it again
        await client.extensions.delete(extension.id)
    ```
"""

__version__ = "0.1.0"

# Main client
from pagerduty_client.client import PagerDutyClient
from pagerduty_client.config import ClientConfig

# HTTP client components (for advanced usage)
from pagerduty_client.http import (
    AsyncHTTPClient,
    AuthProvider,
    TokenAuthProvider,
)

# Endpoint clients
from pagerduty_client.base import BaseEndpointClient
from pagerduty_client.endpoints import ExtensionsClient

# Exceptions
from pagerduty_client.exceptions import (
    PagerDutyClientError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    ResponseDecodeError,
    MissingRootFieldError,
    exception_from_response,
)

__all__ = [
    # Version
    "__version__",
    # Main client
    "PagerDutyClient",
    "ClientConfig",
    # HTTP components
    "AsyncHTTPClient",
    "AuthProvider",
    "TokenAuthProvider",
    # Endpoint clients
    "BaseEndpointClient",
    "ExtensionsClient",
    # Exceptions
    "PagerDutyClientError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "ResponseDecodeError",
    "MissingRootFieldError",
    "exception_from_response",
]
