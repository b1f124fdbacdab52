# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..common.constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_RECEIVE_TIMEOUT,
    ENV_CONNECT_TIMEOUT,
    ENV_RECEIVE_TIMEOUT,
)
from .telemetry import TelemetryConfig


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration settings for restaurant API client operations.

    :param connect_timeout: Seconds allowed for establishing the connection (default: 15.0).
    :type connect_timeout: float
    :param receive_timeout: Seconds allowed for waiting on the response once connected (default: 15.0).
    :type receive_timeout: float
    :param default_headers: Extra headers merged over the built-in JSON headers for every request.
    :type default_headers: dict[str, str]
    :param telemetry: Optional telemetry settings. ``None`` disables request logging and hooks.
    :type telemetry: ~restaurant_client.core.telemetry.TelemetryConfig or None

    :raises ValueError: If either timeout is not positive.
    """

    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    receive_timeout: float = DEFAULT_RECEIVE_TIMEOUT
    default_headers: Mapping[str, str] = field(default_factory=dict)
    telemetry: Optional[TelemetryConfig] = None

    def __post_init__(self) -> None:
        if self.connect_timeout <= 0:
            raise ValueError(f"connect_timeout must be > 0, got {self.connect_timeout}")
        if self.receive_timeout <= 0:
            raise ValueError(f"receive_timeout must be > 0, got {self.receive_timeout}")

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Create a configuration instance, reading timeouts from the environment.

        ``RESTAURANT_API_CONNECT_TIMEOUT`` and ``RESTAURANT_API_RECEIVE_TIMEOUT`` are
        read as seconds; unset variables keep the defaults.

        :return: Configuration instance.
        :rtype: ~restaurant_client.core.config.ClientConfig
        :raises ValueError: If a variable is set but is not a positive number.
        """
        return cls(
            connect_timeout=_float_env(ENV_CONNECT_TIMEOUT, DEFAULT_CONNECT_TIMEOUT),
            receive_timeout=_float_env(ENV_RECEIVE_TIMEOUT, DEFAULT_RECEIVE_TIMEOUT),
        )


def _float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
