# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Failure taxonomy for the restaurant API client.

Every unsuccessful call is described by a single :class:`Failure` value carrying
one :class:`FailureKind` and a human-readable message. Failures are values, not
exceptions: they travel inside a :class:`~restaurant_client.core.results.ResultFailure`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    """Closed set of reasons a call can fail."""

    NETWORK = "network"
    SERVER = "server"
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    PERMISSION = "permission"
    NOT_FOUND = "not_found"
    GENERIC = "generic"


@dataclass(frozen=True)
class Failure:
    """
    Immutable description of a failed call.

    :param kind: Category of the failure. Fixed at construction.
    :type kind: :class:`FailureKind`
    :param message: Human-readable message, suitable for display as-is.
    :type message: :class:`str`

    Example::

        failure = Failure.not_found("Menu item not found")
        assert failure.kind is FailureKind.NOT_FOUND
        print(failure)  # Menu item not found
    """

    kind: FailureKind
    message: str

    def __str__(self) -> str:
        return self.message

    @classmethod
    def network(cls, message: str) -> "Failure":
        return cls(FailureKind.NETWORK, message)

    @classmethod
    def server(cls, message: str) -> "Failure":
        return cls(FailureKind.SERVER, message)

    @classmethod
    def validation(cls, message: str) -> "Failure":
        return cls(FailureKind.VALIDATION, message)

    @classmethod
    def authentication(cls, message: str) -> "Failure":
        return cls(FailureKind.AUTHENTICATION, message)

    @classmethod
    def permission(cls, message: str) -> "Failure":
        return cls(FailureKind.PERMISSION, message)

    @classmethod
    def not_found(cls, message: str) -> "Failure":
        return cls(FailureKind.NOT_FOUND, message)

    @classmethod
    def generic(cls, message: str) -> "Failure":
        return cls(FailureKind.GENERIC, message)


__all__ = ["FailureKind", "Failure"]
