# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Result type returned by every restaurant API operation.

A :class:`Result` is exactly one of two variants:

- :class:`Success`: the call succeeded and carries a ``value``.
- :class:`ResultFailure`: the call failed and carries a
  :class:`~restaurant_client.core.errors.Failure`.

Callers branch on the outcome with :meth:`Result.fold` rather than catching
exceptions, and compose dependent calls with :meth:`Result.map` and
:meth:`Result.flat_map`.

Example::

    result = client.api.get("/menu/42", token=token)
    text = result.fold(
        on_success=lambda item: f"{item['name']}: {item['price']}",
        on_failure=lambda failure: f"Could not load item: {failure.message}",
    )

    # Chain a second call that only runs when the first one succeeded
    order = client.api.get("/orders/7", token=token).flat_map(
        lambda o: client.api.get(f"/users/{o['customer']}", token=token)
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from .errors import Failure

T = TypeVar("T")
R = TypeVar("R")


class Result(Generic[T]):
    """
    Base of the two result variants. Not instantiated directly.

    Only :class:`Success` and :class:`ResultFailure` subclass it.
    """

    __slots__ = ()

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return isinstance(self, ResultFailure)

    @property
    def value_or_none(self) -> Optional[T]:
        """The success value, or ``None`` when this is a failure."""
        if isinstance(self, Success):
            return self.value
        return None

    @property
    def failure_or_none(self) -> Optional[Failure]:
        """The failure, or ``None`` when this is a success."""
        if isinstance(self, ResultFailure):
            return self.failure
        return None

    def fold(
        self,
        *,
        on_success: Callable[[T], R],
        on_failure: Callable[[Failure], R],
    ) -> R:
        """
        Consume the result by calling exactly one of the two handlers.

        :param on_success: Called with the value when this is a :class:`Success`.
        :param on_failure: Called with the :class:`Failure` otherwise.
        :return: Whatever the chosen handler returns.
        """
        if isinstance(self, Success):
            return on_success(self.value)
        if isinstance(self, ResultFailure):
            return on_failure(self.failure)
        raise AssertionError(f"Unknown Result variant: {type(self).__name__}")

    def map(self, transform: Callable[[T], R]) -> "Result[R]":
        """
        Transform the success value. Failures pass through and ``transform``
        is never called for them.
        """
        return self.fold(
            on_success=lambda value: Success(transform(value)),
            on_failure=ResultFailure,
        )

    def flat_map(self, transform: Callable[[T], "Result[R]"]) -> "Result[R]":
        """
        Replace the success with the result of ``transform``. Failures pass
        through untouched.
        """
        return self.fold(on_success=transform, on_failure=ResultFailure)


@dataclass(frozen=True)
class Success(Result[T]):
    """Successful outcome carrying ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class ResultFailure(Result[T]):
    """Failed outcome carrying a :class:`~restaurant_client.core.errors.Failure`."""

    failure: Failure

    def __repr__(self) -> str:
        return f"ResultFailure({self.failure.kind.value}, {self.failure.message!r})"


__all__ = ["Result", "Success", "ResultFailure"]
