# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for restaurant client tests.

This module provides fake HTTP responses and a recording transport so the
access layer can be exercised without network access.
"""

import json

import pytest

from restaurant_client.client import RestaurantClient
from restaurant_client.core.api_client import ApiClient
from restaurant_client.core.config import ClientConfig


class FakeResponse:
    """Minimal stand-in for :class:`requests.Response`."""

    def __init__(self, status_code=200, body=None, text=None, headers=None):
        self.status_code = status_code
        self.headers = headers if headers is not None else {"Content-Type": "application/json"}
        if text is None:
            text = "" if body is None else json.dumps(body)
        self.text = text


class RecordingHTTP:
    """Transport double: replays queued responses and records every call.

    Queue an exception instance to simulate a transport failure.
    """

    def __init__(self, responses=None):
        self._responses = list(responses or [])
        self.calls = []
        self._session = None

    def queue(self, *responses):
        self._responses.extend(responses)

    def _request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if not self._responses:
            raise AssertionError("No more responses")
        item = self._responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self):
        self._session = None

    @property
    def last_call(self):
        return self.calls[-1]


@pytest.fixture
def base_url():
    """Standard test base URL."""
    return "https://api.example.com/api"


@pytest.fixture
def test_config():
    """Test configuration with short timeouts."""
    return ClientConfig(connect_timeout=2.0, receive_timeout=5.0)


@pytest.fixture
def http():
    return RecordingHTTP()


@pytest.fixture
def api(base_url, test_config, http):
    """ApiClient wired to the recording transport."""
    client = ApiClient(base_url, config=test_config)
    client._http = http
    return client


@pytest.fixture
def client(base_url, test_config, http):
    """RestaurantClient wired to the recording transport."""
    c = RestaurantClient(base_url, config=test_config)
    c.api._http = http
    return c


@pytest.fixture
def sample_menu_item():
    return {
        "_id": "665f1c2a9b1e8a0012345678",
        "name": "Pasta",
        "description": "Fresh tagliatelle",
        "price": 12.5,
        "category": "mains",
        "dietaryTags": ["vegetarian"],
        "availability": True,
        "preparationTime": 20,
        "chefSpecial": False,
        "createdAt": "2024-05-01T10:00:00.000Z",
        "updatedAt": "2024-05-02T11:30:00.000Z",
    }


@pytest.fixture
def fake_response():
    """Factory for fake responses: ``fake_response(200, {"a": 1})``."""
    return FakeResponse
