"""Client for the /extensions endpoints."""

from typing import Any, Dict, Optional, Union

import httpx

from pagerduty_types.endpoints import EXTENSIONS_ENDPOINT, ROOT_NODES
from pagerduty_types.extensions import (
    Extension,
    ExtensionEnvelope,
    ListExtensionOptions,
    ListExtensionResponse,
)

from pagerduty_client.base import BaseEndpointClient
from pagerduty_client.exceptions import MissingRootFieldError
from pagerduty_client.http import AsyncHTTPClient


class ExtensionsClient(BaseEndpointClient):
    """
    Client for extensions endpoints.

    Every method is a single request. Errors from the HTTP client propagate
    unchanged; singular responses must be wrapped in an ``extension`` field.
    """

    root_node = ROOT_NODES[EXTENSIONS_ENDPOINT]

    def __init__(self, http_client: AsyncHTTPClient) -> None:
        super().__init__(http_client, f"/{EXTENSIONS_ENDPOINT}")

    async def list(
        self,
        options: Optional[ListExtensionOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> ListExtensionResponse:
        """List Extensions"""
        response = await self._http.get(
            self._base_path,
            params=self._query_to_params(options),
            timeout=timeout,
        )
        return self._decode(response, ListExtensionResponse)

    async def create(
        self,
        extension: Union[Extension, Dict[str, Any]],
        *,
        timeout: Optional[float] = None,
    ) -> Extension:
        """Create Extension"""
        response = await self._http.post(
            self._base_path,
            json_data=self._to_body(extension),
            timeout=timeout,
        )
        return self._extension_from_response(response)

    async def get(
        self,
        id: str,
        *,
        timeout: Optional[float] = None,
    ) -> Extension:
        """Get Extension"""
        response = await self._http.get(self._item_path(id), timeout=timeout)
        return self._extension_from_response(response)

    async def update(
        self,
        id: str,
        extension: Union[Extension, Dict[str, Any]],
        *,
        timeout: Optional[float] = None,
    ) -> Extension:
        """Update Extension"""
        response = await self._http.put(
            self._item_path(id),
            json_data=self._to_body(extension),
            timeout=timeout,
        )
        return self._extension_from_response(response)

    async def delete(
        self,
        id: str,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        """Delete Extension"""
        await self._http.delete(self._item_path(id), timeout=timeout)

    def _item_path(self, id: str) -> str:
        # the id is sent as given; a bare "/" would address the collection
        if not id or not id.strip("/"):
            raise ValueError(f"Invalid extension id: {id!r}")
        return f"{self._base_path}/{id}"

    @staticmethod
    def _to_body(extension: Union[Extension, Dict[str, Any]]) -> Dict[str, Any]:
        if isinstance(extension, Extension):
            return extension.to_payload()
        return extension

    def _extension_from_response(self, response: httpx.Response) -> Extension:
        envelope = self._decode(response, ExtensionEnvelope)
        if envelope.extension is None:
            raise MissingRootFieldError(self.root_node)
        return envelope.extension
