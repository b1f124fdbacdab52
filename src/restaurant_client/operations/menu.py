# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Menu and category operations namespaces."""

from __future__ import annotations

from typing import Any, List, Optional

from ..common.constants import CATEGORIES, MENU
from ..core.results import Result
from ._base import _extract_list, _Operations, _query, _ResourceOperations


class MenuOperations(_ResourceOperations):
    """
    Menu item CRUD. Accessed via ``client.menu``.

    Example::

        vegan = client.menu.list(dietary="vegan", available=True)
        created = client.menu.create({"name": "Pasta", "price": 12.5, "category": cat_id})
        client.menu.update(item_id, {"price": 13.0})
        client.menu.delete(item_id)
    """

    endpoint = MENU

    def list(
        self,
        category: Optional[str] = None,
        dietary: Optional[str] = None,
        search: Optional[str] = None,
        available: Optional[bool] = None,
        chef_special: Optional[bool] = None,
        token: Optional[str] = None,
    ) -> Result[List[Any]]:
        params = _query(
            category=category,
            dietary=dietary,
            search=search,
            available=available,
            chefSpecial=chef_special,
        )
        result = self._api.get(MENU, query_params=params, token=self._token(token))
        return _extract_list(result, "data")


class CategoryOperations(_Operations):
    """Menu categories. Accessed via ``client.categories``."""

    def list(
        self,
        name: Optional[str] = None,
        is_active: Optional[bool] = None,
        token: Optional[str] = None,
    ) -> Result[List[Any]]:
        params = _query(name=name, isActive=is_active)
        result = self._api.get(CATEGORIES, query_params=params, token=self._token(token))
        return _extract_list(result, "categories")
