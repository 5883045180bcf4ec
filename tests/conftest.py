"""Pytest configuration and fixtures for pagerduty-client tests."""

import pytest
import httpx
from typing import Any, Dict, Optional
from unittest.mock import AsyncMock, MagicMock

from pagerduty_client.endpoints import ExtensionsClient
from pagerduty_client.http import AsyncHTTPClient


BASE_URL = "https://api.pagerduty.com"


# ============================================================================
# Mock HTTP Responses
# ============================================================================


def create_mock_response(
    status_code: int = 200,
    json_data: Optional[Any] = None,
    text: str = "",
    headers: Optional[Dict[str, str]] = None,
) -> httpx.Response:
    """Create a mock httpx.Response for testing."""
    response = MagicMock(spec=httpx.Response)
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.text = text if text else (str(json_data) if json_data else "")
    response.headers = headers or {}

    if json_data is not None:
        response.json.return_value = json_data
    else:
        response.json.side_effect = ValueError("No JSON content")

    return response


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def base_url():
    """Default base URL for testing."""
    return BASE_URL


@pytest.fixture
def mock_http_client():
    """Create a mock HTTP client."""
    return AsyncMock(spec=AsyncHTTPClient)


@pytest.fixture
def extensions_client(mock_http_client):
    """Extensions client bound to the mock HTTP client."""
    return ExtensionsClient(mock_http_client)


@pytest.fixture
def extension_data():
    """A webhook extension as returned by the API."""
    return {
        "id": "PJFWPEP",
        "type": "extension",
        "summary": "My Webhook",
        "self": "https://api.pagerduty.com/extensions/PJFWPEP",
        "html_url": None,
        "name": "My Webhook",
        "endpoint_url": "https://example.com/receive_a_pagerduty_webhook",
        "extension_objects": [
            {
                "id": "PIJ90N7",
                "type": "service_reference",
                "summary": "My Application Service",
                "self": "https://api.pagerduty.com/services/PIJ90N7",
                "html_url": "https://subdomain.pagerduty.com/service-directory/PIJ90N7",
            }
        ],
        "extension_schema": {
            "id": "PJFWPEP",
            "type": "extension_schema_reference",
            "summary": "Generic V2 Webhook",
            "self": "https://api.pagerduty.com/extension_schemas/PJFWPEP",
            "html_url": None,
        },
        "config": {
            "notify_types": {"resolve": True, "acknowledge": False},
            "referer": "https://example.com",
            "retries": [1, 2, 3],
        },
    }


@pytest.fixture
def extension_list_data(extension_data):
    """A page of extensions as returned by the API."""
    second = dict(extension_data, id="PZZZZZZ", name="Second")
    return {
        "limit": 25,
        "offset": 0,
        "more": False,
        "total": None,
        "extensions": [second, extension_data],
    }
