"""Endpoint clients, one per PagerDuty resource."""

from pagerduty_client.endpoints.extensions import ExtensionsClient

__all__ = [
    "ExtensionsClient",
]
