# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Inventory operations namespace."""

from __future__ import annotations

from typing import Optional

from ..common.constants import (
    INVENTORY_CHECK,
    INVENTORY_CONSUME,
    INVENTORY_DASHBOARD,
    INVENTORY_LOW_STOCK,
)
from ..core.api_client import JsonObject
from ..core.results import Result
from ._base import _Operations


class InventoryOperations(_Operations):
    """
    Stock checks and consumption. Accessed via ``client.inventory``.

    Quantities are computed by the backend; payloads are forwarded unchanged.
    """

    def check_availability(self, data: JsonObject, token: Optional[str] = None) -> Result[JsonObject]:
        return self._api.post(INVENTORY_CHECK, data, token=self._token(token))

    def consume(self, data: JsonObject, token: Optional[str] = None) -> Result[JsonObject]:
        return self._api.post(INVENTORY_CONSUME, data, token=self._token(token))

    def low_stock(self, token: Optional[str] = None) -> Result[JsonObject]:
        return self._api.get(INVENTORY_LOW_STOCK, token=self._token(token))

    def dashboard(self, token: Optional[str] = None) -> Result[JsonObject]:
        return self._api.get(INVENTORY_DASHBOARD, token=self._token(token))
