# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Utilities for the restaurant client.
"""

__all__ = []
