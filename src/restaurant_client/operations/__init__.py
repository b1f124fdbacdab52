# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the restaurant client.

Each namespace translates typed arguments into ``(endpoint, query, body, token)``
calls on :class:`~restaurant_client.core.api_client.ApiClient`:

- AuthOperations: login, registration and profile
- MenuOperations / CategoryOperations: the menu
- OrderOperations: orders and order statistics
- InventoryOperations: stock checks and consumption
- SupplierOperations, ReviewOperations, UserOperations: remaining resources
"""

__all__ = []
