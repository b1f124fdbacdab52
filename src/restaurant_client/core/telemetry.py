# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Telemetry infrastructure for the restaurant client.

Provides request logging and an extensible hook system for custom
telemetry providers (timers, counters, audit trails).
"""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Generator,
    List,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)

from .errors import Failure

_LOG = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================


@dataclass(frozen=True)
class TelemetryConfig:
    """Configuration for client telemetry.

    Telemetry is opt-in. When enabled, every request is logged on completion
    and dispatched to the configured hooks.

    Example:
        Request logging::

            config = ClientConfig(
                telemetry=TelemetryConfig(enable_logging=True, log_level="DEBUG")
            )

        Custom hook::

            config = ClientConfig(
                telemetry=TelemetryConfig(hooks=[MyTimingHook()])
            )
    """

    enable_logging: bool = False
    log_level: str = "WARNING"
    logger_name: str = "restaurant_client.requests"

    hooks: List["TelemetryHook"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")


# ============================================================================
# Context Objects
# ============================================================================


@dataclass
class RequestContext:
    """Context passed to telemetry hooks for each HTTP request."""

    request_id: str
    method: str  # GET, POST, PUT, PATCH, DELETE
    url: str
    operation: str  # e.g. "get", "get_list", "post"

    start_time: float = field(default_factory=time.perf_counter)

    # Custom data bag for hooks to share state
    custom_data: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ResponseContext:
    """Response information passed to telemetry hooks."""

    # None when no response was received
    status_code: Optional[int]
    duration_ms: float
    failure: Optional[Failure] = None


# ============================================================================
# Hook Protocol
# ============================================================================


@runtime_checkable
class TelemetryHook(Protocol):
    """Protocol for custom telemetry hooks.

    All methods are optional - implement only what you need.

    Example:
        class StatsdHook:
            def __init__(self, statsd):
                self.statsd = statsd

            def on_request_end(self, request: RequestContext, response: ResponseContext):
                self.statsd.timing(f"restaurant.{request.operation}", response.duration_ms)
    """

    def on_request_start(self, context: RequestContext) -> None:
        """Called before each HTTP request is sent."""
        ...

    def on_request_end(
        self, request: RequestContext, response: ResponseContext
    ) -> None:
        """Called after each HTTP request completes, successfully or not."""
        ...

    def on_request_error(self, request: RequestContext, error: Exception) -> None:
        """Called when the transport raised before a response was received."""
        ...


# ============================================================================
# Telemetry Manager
# ============================================================================


class TelemetryManager:
    """Manages request logging and hook dispatch.

    This class is internal and not part of the public API.
    """

    def __init__(self, config: Optional[TelemetryConfig] = None) -> None:
        self._config = config or TelemetryConfig()
        self._logger: Optional[logging.Logger] = None
        self._hooks = list(self._config.hooks)
        # Applied per manager; the named logger is shared across clients
        self._level: int = logging.getLevelName(self._config.log_level.upper())

        if self._config.enable_logging:
            self._logger = logging.getLogger(self._config.logger_name)

    @contextmanager
    def trace_request(
        self,
        operation: str,
        method: str,
        url: str,
    ) -> Generator[RequestContext, None, None]:
        """Create a request context and dispatch the start hooks.

        Usage:
            with telemetry.trace_request("get", "GET", url) as ctx:
                response = self._http._request(...)
                telemetry.record_response(ctx, response.status_code)
        """
        ctx = RequestContext(
            request_id=str(uuid.uuid4()),
            method=method,
            url=url,
            operation=operation,
        )
        self._dispatch("on_request_start", ctx)
        try:
            yield ctx
        except Exception as e:
            self._dispatch("on_request_error", ctx, e)
            raise

    def record_response(
        self,
        ctx: RequestContext,
        status_code: Optional[int],
        failure: Optional[Failure] = None,
    ) -> None:
        """Log the completed request and dispatch to hooks."""
        duration_ms = (time.perf_counter() - ctx.start_time) * 1000
        response = ResponseContext(
            status_code=status_code,
            duration_ms=duration_ms,
            failure=failure,
        )

        failed = failure is not None or status_code is None or status_code >= 400
        level = logging.WARNING if failed else logging.DEBUG
        if self._logger and level >= self._level:
            status = status_code if status_code is not None else "-"
            message = f"{ctx.operation} {ctx.method} {ctx.url} {status} {duration_ms:.1f}ms"
            if failure is not None:
                message = f"{message} [{failure.kind.value}] {failure.message}"
            self._logger.log(level, message, extra={"request_id": ctx.request_id})

        self._dispatch("on_request_end", ctx, response)

    def _dispatch(self, name: str, *args: Any) -> None:
        for hook in self._hooks:
            handler = getattr(hook, name, None)
            if handler is None:
                continue
            try:
                handler(*args)
            except Exception:
                # Hooks must not break requests
                _LOG.debug("Telemetry hook %r failed in %s", hook, name, exc_info=True)


# ============================================================================
# No-op Manager for when telemetry is disabled
# ============================================================================


class NoOpTelemetryManager:
    """No-op telemetry manager when telemetry is disabled."""

    @contextmanager
    def trace_request(
        self,
        operation: str,
        method: str,
        url: str,
    ) -> Generator[RequestContext, None, None]:
        yield RequestContext(
            request_id=str(uuid.uuid4()),
            method=method,
            url=url,
            operation=operation,
        )

    def record_response(self, *args: Any, **kwargs: Any) -> None:
        pass


def create_telemetry_manager(
    config: Optional[TelemetryConfig],
) -> Union[TelemetryManager, NoOpTelemetryManager]:
    """Factory to create appropriate telemetry manager."""
    if config is None:
        return NoOpTelemetryManager()

    if not (config.enable_logging or config.hooks):
        return NoOpTelemetryManager()

    return TelemetryManager(config)


__all__ = [
    "TelemetryConfig",
    "TelemetryHook",
    "TelemetryManager",
    "NoOpTelemetryManager",
    "RequestContext",
    "ResponseContext",
    "create_telemetry_manager",
]
