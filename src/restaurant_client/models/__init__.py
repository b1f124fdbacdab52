# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models for restaurant API entities.

- :class:`~restaurant_client.models.user.User`: Account returned by the auth and users endpoints.
- :class:`~restaurant_client.models.menu_item.MenuItem`: Dish on the menu.
- :class:`~restaurant_client.models.category.Category`: Menu category.

Note:
    This ``__init__.py`` does NOT import/export models. Import directly from
    the specific module files.
"""

__all__ = []
