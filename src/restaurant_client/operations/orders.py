# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Order operations namespace."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from ..common.constants import ORDER_STATS, ORDERS
from ..core.api_client import JsonObject
from ..core.results import Result
from ._base import _extract_list, _query, _ResourceOperations


class OrderOperations(_ResourceOperations):
    """
    Orders. Accessed via ``client.orders``.

    Status transitions are validated by the backend; :meth:`update_status` only
    forwards the requested status.

    Example::

        pending = client.orders.list(status="pending", start_date=datetime(2024, 5, 1))
        client.orders.update_status(order_id, "preparing")
        stats = client.orders.stats()
    """

    endpoint = ORDERS

    def list(
        self,
        status: Optional[str] = None,
        customer: Optional[str] = None,
        order_type: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        min_amount: Optional[float] = None,
        max_amount: Optional[float] = None,
        token: Optional[str] = None,
    ) -> Result[List[Any]]:
        params = _query(
            status=status,
            customer=customer,
            orderType=order_type,
            startDate=start_date,
            endDate=end_date,
            minAmount=min_amount,
            maxAmount=max_amount,
        )
        result = self._api.get(ORDERS, query_params=params, token=self._token(token))
        return _extract_list(result, "orders")

    def update_status(self, order_id: str, status: str, token: Optional[str] = None) -> Result[JsonObject]:
        return self._api.patch(f"{self._path(order_id)}/status", {"status": status}, token=self._token(token))

    def stats(self, token: Optional[str] = None) -> Result[JsonObject]:
        return self._api.get(ORDER_STATS, token=self._token(token))
