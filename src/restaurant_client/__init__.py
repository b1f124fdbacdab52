# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Typed Python client for the restaurant management REST API.

Every call returns a :class:`~restaurant_client.core.results.Result` that is either a
``Success`` carrying the decoded JSON or a ``ResultFailure`` carrying a classified
:class:`~restaurant_client.core.errors.Failure`.
"""

import logging

from .client import RestaurantClient
from .core.api_client import ApiClient
from .core.async_client import AsyncApiClient
from .core.config import ClientConfig
from .core.errors import Failure, FailureKind
from .core.results import Result, ResultFailure, Success

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "RestaurantClient",
    "ApiClient",
    "AsyncApiClient",
    "ClientConfig",
    "Failure",
    "FailureKind",
    "Result",
    "ResultFailure",
    "Success",
    "__version__",
]
