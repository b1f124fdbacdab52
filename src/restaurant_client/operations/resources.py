# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Supplier, review and user operations namespaces."""

from __future__ import annotations

from typing import Any, List, Optional

from ..common.constants import REVIEWS, SUPPLIERS, USERS
from ..core.results import Result
from ._base import _extract_list, _query, _ResourceOperations


class SupplierOperations(_ResourceOperations):
    """Suppliers. Accessed via ``client.suppliers``."""

    endpoint = SUPPLIERS

    def list(self, active: Optional[bool] = None, token: Optional[str] = None) -> Result[List[Any]]:
        result = self._api.get(SUPPLIERS, query_params=_query(active=active), token=self._token(token))
        return _extract_list(result, "suppliers")


class ReviewOperations(_ResourceOperations):
    """Reviews. Accessed via ``client.reviews``."""

    endpoint = REVIEWS

    def list(
        self,
        user: Optional[str] = None,
        menu_item: Optional[str] = None,
        rating: Optional[int] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        token: Optional[str] = None,
    ) -> Result[List[Any]]:
        params = _query(user=user, menuItem=menu_item, rating=rating, dateFrom=date_from, dateTo=date_to)
        result = self._api.get(REVIEWS, query_params=params, token=self._token(token))
        return _extract_list(result, "reviews")


class UserOperations(_ResourceOperations):
    """User administration. Accessed via ``client.users``."""

    endpoint = USERS

    def list(self, token: Optional[str] = None) -> Result[List[Any]]:
        return _extract_list(self._api.get(USERS, token=self._token(token)), "users")
