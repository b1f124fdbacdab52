# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Coroutine facade over :class:`~restaurant_client.core.api_client.ApiClient`.

Each operation runs the blocking request in a worker thread so several calls can be
awaited concurrently::

    aio = AsyncApiClient(api)
    menu, orders = await asyncio.gather(
        aio.get_list("/menu", token=token),
        aio.get_list("/orders", token=token),
    )

Completion order between independent calls is not defined. Cancelling the awaiting
task does not abort the request already in flight; its result is discarded.
"""

from __future__ import annotations

import asyncio
from typing import Any, List, Optional

from .api_client import ApiClient, JsonObject, QueryParams
from .results import Result


class AsyncApiClient:
    """
    Async counterpart of :class:`ApiClient` sharing its configuration and session.

    :param api: The synchronous client that performs the requests.
    :type api: ~restaurant_client.core.api_client.ApiClient
    """

    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def get(
        self,
        endpoint: str,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result[JsonObject]:
        return await asyncio.to_thread(self._api.get, endpoint, query_params, token)

    async def get_list(
        self,
        endpoint: str,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result[List[Any]]:
        return await asyncio.to_thread(self._api.get_list, endpoint, query_params, token)

    async def post(
        self,
        endpoint: str,
        body: JsonObject,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result[JsonObject]:
        return await asyncio.to_thread(self._api.post, endpoint, body, query_params, token)

    async def put(
        self,
        endpoint: str,
        body: JsonObject,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result[JsonObject]:
        return await asyncio.to_thread(self._api.put, endpoint, body, query_params, token)

    async def patch(
        self,
        endpoint: str,
        body: JsonObject,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result[JsonObject]:
        return await asyncio.to_thread(self._api.patch, endpoint, body, query_params, token)

    async def delete(
        self,
        endpoint: str,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result[JsonObject]:
        return await asyncio.to_thread(self._api.delete, endpoint, query_params, token)
