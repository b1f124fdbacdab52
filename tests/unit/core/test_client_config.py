# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import pytest

from restaurant_client.core.config import ClientConfig
from restaurant_client.core.telemetry import TelemetryConfig


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig()
        assert config.connect_timeout == 15.0
        assert config.receive_timeout == 15.0
        assert dict(config.default_headers) == {}
        assert config.telemetry is None

    @pytest.mark.parametrize("field", ["connect_timeout", "receive_timeout"])
    @pytest.mark.parametrize("value", [0, -1.5])
    def test_non_positive_timeouts_rejected(self, field, value):
        with pytest.raises(ValueError):
            ClientConfig(**{field: value})

    def test_frozen(self):
        config = ClientConfig()
        with pytest.raises(AttributeError):
            config.connect_timeout = 1.0

    def test_telemetry_attached(self):
        telemetry = TelemetryConfig(enable_logging=True)
        assert ClientConfig(telemetry=telemetry).telemetry is telemetry


class TestFromEnv:
    def test_unset_uses_defaults(self, monkeypatch):
        monkeypatch.delenv("RESTAURANT_API_CONNECT_TIMEOUT", raising=False)
        monkeypatch.delenv("RESTAURANT_API_RECEIVE_TIMEOUT", raising=False)
        config = ClientConfig.from_env()
        assert (config.connect_timeout, config.receive_timeout) == (15.0, 15.0)

    def test_reads_timeouts(self, monkeypatch):
        monkeypatch.setenv("RESTAURANT_API_CONNECT_TIMEOUT", "3")
        monkeypatch.setenv("RESTAURANT_API_RECEIVE_TIMEOUT", "42.5")
        config = ClientConfig.from_env()
        assert (config.connect_timeout, config.receive_timeout) == (3.0, 42.5)

    def test_blank_value_uses_default(self, monkeypatch):
        monkeypatch.setenv("RESTAURANT_API_CONNECT_TIMEOUT", "  ")
        monkeypatch.delenv("RESTAURANT_API_RECEIVE_TIMEOUT", raising=False)
        assert ClientConfig.from_env().connect_timeout == 15.0

    def test_non_number_rejected(self, monkeypatch):
        monkeypatch.setenv("RESTAURANT_API_RECEIVE_TIMEOUT", "soon")
        with pytest.raises(ValueError, match="RESTAURANT_API_RECEIVE_TIMEOUT"):
            ClientConfig.from_env()

    def test_negative_rejected(self, monkeypatch):
        monkeypatch.setenv("RESTAURANT_API_CONNECT_TIMEOUT", "-2")
        monkeypatch.delenv("RESTAURANT_API_RECEIVE_TIMEOUT", raising=False)
        with pytest.raises(ValueError):
            ClientConfig.from_env()
