# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Tests for telemetry infrastructure."""

import logging
from unittest.mock import MagicMock

import pytest
import requests

from restaurant_client.core.api_client import ApiClient
from restaurant_client.core.config import ClientConfig
from restaurant_client.core.errors import Failure, FailureKind
from restaurant_client.core.telemetry import (
    NoOpTelemetryManager,
    RequestContext,
    ResponseContext,
    TelemetryConfig,
    TelemetryHook,
    TelemetryManager,
    create_telemetry_manager,
)


class TestTelemetryConfig:
    """Tests for TelemetryConfig dataclass."""

    def test_default_values(self):
        config = TelemetryConfig()
        assert config.enable_logging is False
        assert config.log_level == "WARNING"
        assert config.logger_name == "restaurant_client.requests"
        assert config.hooks == []

    def test_immutability(self):
        config = TelemetryConfig(enable_logging=True)
        with pytest.raises(AttributeError):
            config.enable_logging = False

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError):
            TelemetryConfig(log_level="CHATTY")

    def test_log_level_case_insensitive(self):
        assert TelemetryConfig(log_level="debug").log_level == "debug"


class TestTelemetryManagerFactory:
    """Tests for create_telemetry_manager factory."""

    def test_returns_noop_when_config_none(self):
        assert isinstance(create_telemetry_manager(None), NoOpTelemetryManager)

    def test_returns_noop_when_all_disabled(self):
        assert isinstance(create_telemetry_manager(TelemetryConfig()), NoOpTelemetryManager)

    def test_returns_manager_when_logging_enabled(self):
        manager = create_telemetry_manager(TelemetryConfig(enable_logging=True))
        assert isinstance(manager, TelemetryManager)

    def test_returns_manager_when_hooks_configured(self):
        manager = create_telemetry_manager(TelemetryConfig(hooks=[MagicMock()]))
        assert isinstance(manager, TelemetryManager)


class TestNoOpTelemetryManager:
    def test_trace_request_yields_context(self):
        manager = NoOpTelemetryManager()
        with manager.trace_request("get", "GET", "https://x/menu") as ctx:
            assert isinstance(ctx, RequestContext)
            assert ctx.method == "GET"
            assert ctx.operation == "get"
        manager.record_response(ctx, 200)

    def test_exceptions_propagate(self):
        manager = NoOpTelemetryManager()
        with pytest.raises(RuntimeError):
            with manager.trace_request("get", "GET", "https://x"):
                raise RuntimeError("boom")


class TestTelemetryManagerHooks:
    def _manager(self, hook):
        return TelemetryManager(TelemetryConfig(hooks=[hook]))

    def test_start_and_end_dispatched(self):
        hook = MagicMock()
        manager = self._manager(hook)
        with manager.trace_request("get_list", "GET", "https://x/orders") as ctx:
            pass
        manager.record_response(ctx, 200)

        hook.on_request_start.assert_called_once_with(ctx)
        request, response = hook.on_request_end.call_args[0]
        assert request is ctx
        assert isinstance(response, ResponseContext)
        assert response.status_code == 200
        assert response.failure is None
        assert response.duration_ms >= 0

    def test_error_dispatched_and_reraised(self):
        hook = MagicMock()
        manager = self._manager(hook)
        error = requests.exceptions.ConnectionError("refused")
        with pytest.raises(requests.exceptions.ConnectionError):
            with manager.trace_request("get", "GET", "https://x"):
                raise error
        ctx, raised = hook.on_request_error.call_args[0]
        assert raised is error
        assert ctx.url == "https://x"

    def test_request_ids_unique(self):
        manager = self._manager(MagicMock())
        with manager.trace_request("get", "GET", "https://x") as first:
            pass
        with manager.trace_request("get", "GET", "https://x") as second:
            pass
        assert first.request_id != second.request_id

    def test_failing_hook_does_not_break_request(self):
        hook = MagicMock()
        hook.on_request_start.side_effect = RuntimeError("hook bug")
        hook.on_request_end.side_effect = RuntimeError("hook bug")
        manager = self._manager(hook)
        with manager.trace_request("get", "GET", "https://x") as ctx:
            pass
        manager.record_response(ctx, 200)

    def test_partial_hook_supported(self):
        class EndOnly:
            def __init__(self):
                self.seen = []

            def on_request_end(self, request, response):
                self.seen.append(response.status_code)

        hook = EndOnly()
        manager = self._manager(hook)
        with manager.trace_request("delete", "DELETE", "https://x/menu/1") as ctx:
            pass
        manager.record_response(ctx, 204)
        assert hook.seen == [204]

    def test_hook_protocol_runtime_checkable(self):
        class Full:
            def on_request_start(self, context):
                pass

            def on_request_end(self, request, response):
                pass

            def on_request_error(self, request, error):
                pass

        assert isinstance(Full(), TelemetryHook)


class TestRequestLogging:
    LOGGER = "restaurant_client.requests"

    def _manager(self, level="DEBUG"):
        return TelemetryManager(TelemetryConfig(enable_logging=True, log_level=level))

    def test_success_logged_at_debug(self, caplog):
        manager = self._manager()
        with caplog.at_level(logging.DEBUG, logger=self.LOGGER):
            with manager.trace_request("get", "GET", "https://x/menu") as ctx:
                pass
            manager.record_response(ctx, 200)
        record = caplog.records[-1]
        assert record.levelno == logging.DEBUG
        assert record.getMessage().startswith("get GET https://x/menu 200 ")
        assert record.request_id == ctx.request_id

    def test_failure_logged_at_warning_with_kind(self, caplog):
        manager = self._manager()
        with caplog.at_level(logging.DEBUG, logger=self.LOGGER):
            with manager.trace_request("post", "POST", "https://x/auth/login") as ctx:
                pass
            manager.record_response(ctx, 401, Failure.authentication("Invalid credentials"))
        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.getMessage().endswith("[authentication] Invalid credentials")

    def test_level_does_not_touch_shared_logger(self):
        shared = logging.getLogger(self.LOGGER)
        before = shared.level
        self._manager("DEBUG")
        self._manager("ERROR")
        assert shared.level == before

    def test_level_applied_per_manager(self, caplog):
        verbose = self._manager("DEBUG")
        quiet = self._manager("WARNING")
        with caplog.at_level(logging.DEBUG, logger=self.LOGGER):
            with quiet.trace_request("get", "GET", "https://x/quiet") as quiet_ctx:
                pass
            quiet.record_response(quiet_ctx, 200)
            with verbose.trace_request("get", "GET", "https://x/verbose") as verbose_ctx:
                pass
            verbose.record_response(verbose_ctx, 200)
        messages = [r.getMessage() for r in caplog.records if r.name == self.LOGGER]
        assert any("https://x/verbose" in m for m in messages)
        assert not any("https://x/quiet" in m for m in messages)

    def test_failures_pass_warning_threshold(self, caplog):
        manager = self._manager("WARNING")
        with caplog.at_level(logging.DEBUG, logger=self.LOGGER):
            with manager.trace_request("get", "GET", "https://x") as ctx:
                pass
            manager.record_response(ctx, 503, Failure.server("down"))
        assert caplog.records[-1].levelno == logging.WARNING

    def test_missing_status_logged_as_dash(self, caplog):
        manager = self._manager()
        with caplog.at_level(logging.DEBUG, logger=self.LOGGER):
            with manager.trace_request("get", "GET", "https://x") as ctx:
                pass
            manager.record_response(ctx, None, Failure.network("timed out"))
        assert " - " in caplog.records[-1].getMessage()


class TestApiClientIntegration:
    """Telemetry sees every request issued through the ApiClient."""

    def _api(self, base_url, http, hook):
        api = ApiClient(base_url, config=ClientConfig(telemetry=TelemetryConfig(hooks=[hook])))
        api._http = http
        return api

    def test_response_recorded_with_failure(self, base_url, http, fake_response):
        hook = MagicMock()
        api = self._api(base_url, http, hook)
        http.queue(fake_response(404, {"message": "gone"}))
        api.get("/menu/1")

        request, response = hook.on_request_end.call_args[0]
        assert request.operation == "get"
        assert request.url == "https://api.example.com/api/menu/1"
        assert response.status_code == 404
        assert response.failure == Failure.not_found("gone")

    def test_transport_error_recorded(self, base_url, http):
        hook = MagicMock()
        api = self._api(base_url, http, hook)
        http.queue(requests.exceptions.Timeout("slow"))
        result = api.get_list("/orders")

        assert result.failure_or_none.kind is FailureKind.NETWORK
        hook.on_request_error.assert_called_once()
        _, response = hook.on_request_end.call_args[0]
        assert response.status_code is None
        assert response.failure == Failure.network("slow")
