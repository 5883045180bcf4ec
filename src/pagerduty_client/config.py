"""
Client configuration.

A configuration can come from a YAML profile file or from ``PAGERDUTY_*``
environment variables.
"""

import os
from typing import Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field

from pagerduty_client.http import DEFAULT_BASE_URL

ENV_PREFIX = "PAGERDUTY_"


class ClientConfig(BaseModel):
    api_url: str = DEFAULT_BASE_URL
    api_token: Optional[str] = None
    token_type: Literal["token", "bearer"] = "token"
    from_email: Optional[str] = Field(None, description="Sent as the From header")
    timeout: float = 30.0
    headers: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_yaml(cls, path: str) -> "ClientConfig":
        with open(path, "r") as file:
            data = yaml.safe_load(file)

        if data is None:
            data = {}
        return cls(**data)

    def write_yaml(self, path: str) -> None:
        with open(path, "w") as file:
            file.write(yaml.safe_dump(self.model_dump(exclude_unset=True)))

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "ClientConfig":
        """Build a config from PAGERDUTY_API_URL, PAGERDUTY_API_TOKEN, PAGERDUTY_TOKEN_TYPE, PAGERDUTY_FROM and PAGERDUTY_TIMEOUT."""
        environ = os.environ if environ is None else environ

        mapping = {
            "API_URL": "api_url",
            "API_TOKEN": "api_token",
            "TOKEN_TYPE": "token_type",
            "FROM": "from_email",
            "TIMEOUT": "timeout",
        }
        data = {}
        for suffix, field in mapping.items():
            value = environ.get(ENV_PREFIX + suffix)
            if value:
                data[field] = value
        return cls(**data)
