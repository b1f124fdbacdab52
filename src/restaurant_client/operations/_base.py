# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional
from urllib.parse import quote

from ..core.api_client import ApiClient, JsonObject
from ..core.results import Result, Success

if TYPE_CHECKING:
    from ..client import RestaurantClient

_LOG = logging.getLogger(__name__)


def _extract_list(result: Result[JsonObject], field: str) -> Result[List[Any]]:
    """
    Pull a list out of a scalar GET result.

    Tries ``field`` first, then ``data``. Any other shape yields an empty list.
    """

    def pick(body: JsonObject) -> Result[List[Any]]:
        for key in (field, "data"):
            value = body.get(key)
            if isinstance(value, list):
                return Success(value)
        _LOG.debug("Unexpected response format for %s: keys=%s", field, sorted(body))
        return Success([])

    return result.flat_map(pick)


def _query(**values: Any) -> Optional[Dict[str, Any]]:
    """Drop unset filters; ``None`` when nothing is left."""
    params = {k: v for k, v in values.items() if v is not None}
    return params or None


class _Operations:
    """Base for operation namespaces bound to a :class:`RestaurantClient`."""

    def __init__(self, client: "RestaurantClient") -> None:
        self._client = client

    @property
    def _api(self) -> ApiClient:
        return self._client.api

    def _token(self, token: Optional[str]) -> Optional[str]:
        return self._client._resolve_token(token)


class _ResourceOperations(_Operations):
    """Single-record CRUD shared by the resource namespaces."""

    endpoint: str = ""

    def _path(self, resource_id: str) -> str:
        # Ids are a single path segment
        return f"{self.endpoint}/{quote(str(resource_id), safe='')}"

    def get(self, resource_id: str, token: Optional[str] = None) -> Result[JsonObject]:
        return self._api.get(self._path(resource_id), token=self._token(token))

    def create(self, data: JsonObject, token: Optional[str] = None) -> Result[JsonObject]:
        return self._api.post(self.endpoint, data, token=self._token(token))

    def update(self, resource_id: str, data: JsonObject, token: Optional[str] = None) -> Result[JsonObject]:
        return self._api.put(self._path(resource_id), data, token=self._token(token))

    def delete(self, resource_id: str, token: Optional[str] = None) -> Result[JsonObject]:
        return self._api.delete(self._path(resource_id), token=self._token(token))
