# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for the restaurant REST API: endpoint paths, header names and defaults.
"""

# Timeouts in seconds, applied separately to connect and to receive
DEFAULT_CONNECT_TIMEOUT = 15.0
DEFAULT_RECEIVE_TIMEOUT = 15.0

# Environment variables
ENV_BASE_URL = "RESTAURANT_API_BASE_URL"
ENV_CONNECT_TIMEOUT = "RESTAURANT_API_CONNECT_TIMEOUT"
ENV_RECEIVE_TIMEOUT = "RESTAURANT_API_RECEIVE_TIMEOUT"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
CONTENT_TYPE_JSON = "application/json"

HEADER_SKIP_BROWSER_WARNING = "ngrok-skip-browser-warning"
"""Suppresses the interstitial warning page served by ngrok tunnels in front of dev hosts."""

# Auth
AUTH_LOGIN = "/auth/login"
AUTH_REGISTER = "/auth/register"
AUTH_ME = "/auth/me"
AUTH_UPDATE = "/auth/update"
AUTH_CHANGE_PASSWORD = "/auth/change-password"

# Menu
MENU = "/menu"
CATEGORIES = "/category"

# Orders
ORDERS = "/orders"
ORDER_STATS = "/orders/stats"

# Inventory
INVENTORY_CHECK = "/inventory/check-availability"
INVENTORY_CONSUME = "/inventory/consume"
INVENTORY_LOW_STOCK = "/inventory/low-stock"
INVENTORY_DASHBOARD = "/inventory/dashboard"

SUPPLIERS = "/supplier"
REVIEWS = "/reviews"
USERS = "/users"
