# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from typing import TYPE_CHECKING, List, Optional

from .common.constants import ENV_BASE_URL
from .core.api_client import ApiClient, JsonObject, QueryParams
from .core.async_client import AsyncApiClient
from .core.config import ClientConfig
from .core.results import Result
from .core.token_store import InMemoryTokenStore, TokenStore
from .operations.auth import AuthOperations
from .operations.inventory import InventoryOperations
from .operations.menu import CategoryOperations, MenuOperations
from .operations.orders import OrderOperations
from .operations.resources import ReviewOperations, SupplierOperations, UserOperations

if TYPE_CHECKING:
    import pandas as pd


class RestaurantClient:
    """
    High-level client for the restaurant management API.

    Wraps one :class:`~restaurant_client.core.api_client.ApiClient` and exposes the
    backend resources as namespaces. Every operation returns a
    :class:`~restaurant_client.core.results.Result`; nothing raises on network or
    server errors.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager enables connection pooling and
        releases the session on exit::

            with RestaurantClient("https://api.example.com/api") as client:
                client.auth.login("manager@example.com", "secret")
                orders = client.orders.list(status="pending")

    Namespaces:
        - ``client.auth``: login, registration, profile
        - ``client.menu`` / ``client.categories``: the menu
        - ``client.orders``: orders and statistics
        - ``client.inventory``: stock checks and consumption
        - ``client.suppliers``, ``client.reviews``, ``client.users``

    The raw access layer is available as ``client.api`` (synchronous) and
    ``client.aio`` (coroutines) for endpoints without a namespace method.

    :param base_url: API root, for example ``"https://api.example.com/api"``.
        Trailing slash is automatically removed.
    :type base_url: :class:`str`
    :param token_store: Where the bearer token is kept between calls. Defaults to
        an :class:`~restaurant_client.core.token_store.InMemoryTokenStore`.
    :type token_store: ~restaurant_client.core.token_store.TokenStore or None
    :param config: Optional timeouts, headers and telemetry. Defaults to
        :meth:`~restaurant_client.core.config.ClientConfig.from_env`.
    :type config: ~restaurant_client.core.config.ClientConfig or None

    :raises ValueError: If ``base_url`` is missing or empty after trimming.
    """

    def __init__(
        self,
        base_url: str,
        token_store: Optional[TokenStore] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        self._config = config or ClientConfig.from_env()
        self.api = ApiClient(base_url, config=self._config)
        self.aio = AsyncApiClient(self.api)
        self.token_store: TokenStore = token_store if token_store is not None else InMemoryTokenStore()

        self.auth = AuthOperations(self)
        self.menu = MenuOperations(self)
        self.categories = CategoryOperations(self)
        self.orders = OrderOperations(self)
        self.inventory = InventoryOperations(self)
        self.suppliers = SupplierOperations(self)
        self.reviews = ReviewOperations(self)
        self.users = UserOperations(self)

    @classmethod
    def from_env(cls, token_store: Optional[TokenStore] = None) -> "RestaurantClient":
        """
        Create a client from ``RESTAURANT_API_BASE_URL`` and the timeout variables.

        :raises ValueError: If ``RESTAURANT_API_BASE_URL`` is not set.
        """
        base_url = os.environ.get(ENV_BASE_URL, "")
        if not base_url.strip():
            raise ValueError(f"{ENV_BASE_URL} is not set.")
        return cls(base_url, token_store=token_store, config=ClientConfig.from_env())

    def __enter__(self) -> "RestaurantClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling. All operations within
        the context will reuse this session.
        """
        self.api.open_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Close the HTTP session (if any). Safe to call multiple times; the
        client keeps working afterwards without pooling.
        """
        self.api.close()

    def _resolve_token(self, token: Optional[str]) -> Optional[str]:
        if token is not None:
            return token
        return self.token_store.get_token()

    # ---------------- pandas helpers ----------------
    def get_dataframe(
        self,
        endpoint: str,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result["pd.DataFrame"]:
        """
        Fetch a list endpoint as a :class:`pandas.DataFrame`.

        :param endpoint: List endpoint, e.g. ``"/orders"``.
        :type endpoint: :class:`str`
        :return: ``Success(DataFrame)`` with one row per element, or the failure of the GET.

        Example::

            df = client.get_dataframe("/menu", {"available": True}).value_or_none
        """
        from .utils._pandas import records_to_dataframe

        rows = self.api.get_list(endpoint, query_params=query_params, token=self._resolve_token(token))
        return rows.map(records_to_dataframe)

    def create_from_dataframe(
        self,
        endpoint: str,
        df: "pd.DataFrame",
        token: Optional[str] = None,
        na_as_null: bool = False,
    ) -> List[Result[JsonObject]]:
        """
        POST each row of ``df`` to ``endpoint``, one request per row.

        :param na_as_null: Send missing cells as ``null`` instead of omitting them.
        :return: One result per row, in row order. A failed row does not stop the rest.
        """
        from .utils._pandas import dataframe_to_records

        resolved = self._resolve_token(token)
        return [self.api.post(endpoint, record, token=resolved) for record in dataframe_to_records(df, na_as_null)]


__all__ = ["RestaurantClient"]
