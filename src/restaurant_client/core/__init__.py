# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the restaurant client.

This module contains the foundational components including the result and
failure model, configuration, HTTP access layer and token storage.
"""

from .errors import Failure, FailureKind
from .results import Result, ResultFailure, Success

__all__ = [
    "Failure",
    "FailureKind",
    "Result",
    "ResultFailure",
    "Success",
]
