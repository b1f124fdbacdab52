# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Thin HTTP transport with timeout handling and optional session support.

This module provides :class:`~restaurant_client.core._http._HttpClient`, a wrapper
around the requests library that applies split connect/receive timeouts to every
request and optionally reuses a :class:`requests.Session` for connection pooling.
It performs no retries: every failure is reported to the caller exactly once.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

import requests


class _HttpClient:
    """
    HTTP transport with per-request timeouts and optional session support.

    :param connect_timeout: Seconds allowed to establish the connection.
    :type connect_timeout: :class:`float`
    :param receive_timeout: Seconds allowed to wait for the response.
    :type receive_timeout: :class:`float`
    :param session: Optional requests.Session for connection pooling. If provided,
        all requests use this session for efficient connection reuse.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        connect_timeout: float,
        receive_timeout: float,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.connect_timeout = connect_timeout
        self.receive_timeout = receive_timeout
        self._session = session

    @property
    def timeout(self) -> Tuple[float, float]:
        return (self.connect_timeout, self.receive_timeout)

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Execute a single HTTP request.

        :param method: HTTP method (GET, POST, PUT, PATCH, DELETE).
        :type method: :class:`str`
        :param url: Fully-built target URL.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()`` or
            ``session.request()``, including headers and data.
        :return: HTTP response object.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: On any transport failure.
        """
        kwargs.setdefault("timeout", self.timeout)
        if self._session is not None:
            return self._session.request(method, url, **kwargs)
        return requests.request(method, url, **kwargs)

    def close(self) -> None:
        """
        Close the HTTP client and release resources.

        If a session was provided, this method closes it. Safe to call multiple times.
        """
        if self._session is not None:
            self._session.close()
            self._session = None
