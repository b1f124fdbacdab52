# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Typed access layer over the restaurant REST API.

:class:`ApiClient` is the single point of contact with the remote service. Every
public operation returns a :class:`~restaurant_client.core.results.Result`; transport
exceptions, HTML error pages, malformed JSON and non-2xx statuses are all converted
into a :class:`~restaurant_client.core.errors.Failure` and never raised.
"""

from __future__ import annotations

import datetime as _dt
import json
import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional
from urllib.parse import urlencode

import requests

from ..common.constants import (
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_SKIP_BROWSER_WARNING,
)
from ._error_codes import failure_kind_for_status
from ._http import _HttpClient
from .config import ClientConfig
from .errors import Failure
from .results import Result, ResultFailure, Success
from .telemetry import create_telemetry_manager

_LOG = logging.getLogger(__name__)

JsonObject = Dict[str, Any]
QueryParams = Mapping[str, Any]


class ApiClient:
    """
    HTTP client that maps every outcome into a :class:`Result`.

    :param base_url: Scheme, host and optional path prefix, for example
        ``"https://api.example.com/api"``. A trailing slash is removed.
    :type base_url: :class:`str`
    :param headers: Extra headers merged over the defaults for every request.
    :type headers: :class:`dict` | None
    :param config: Timeouts, default headers and telemetry. Defaults to :class:`ClientConfig`.
    :type config: ~restaurant_client.core.config.ClientConfig | None
    :param session: Optional :class:`requests.Session` to reuse connections. The
        client does not close a session it did not create.
    :type session: :class:`requests.Session` | None

    :raises ValueError: If ``base_url`` is missing or empty after trimming.

    Example::

        api = ApiClient("https://api.example.com/api")
        result = api.post("/auth/login", {"email": "x@x.com", "password": "secret"})
        token = result.fold(
            on_success=lambda body: body["token"],
            on_failure=lambda failure: None,
        )
        menu = api.get_list("/menu", query_params={"available": True}, token=token)
    """

    def __init__(
        self,
        base_url: str,
        headers: Optional[Mapping[str, str]] = None,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or "").strip().rstrip("/")
        if not self.base_url:
            raise ValueError("base_url is required.")
        self.config = config or ClientConfig()
        self.default_headers: Mapping[str, str] = MappingProxyType(
            {
                HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON,
                HEADER_SKIP_BROWSER_WARNING: "true",
                HEADER_ACCEPT: CONTENT_TYPE_JSON,
                **self.config.default_headers,
                **(headers or {}),
            }
        )
        self._http = _HttpClient(
            connect_timeout=self.config.connect_timeout,
            receive_timeout=self.config.receive_timeout,
            session=session,
        )
        self._owns_session = False
        self._telemetry = create_telemetry_manager(self.config.telemetry)

    # ------------------------------------------------------------ lifecycle
    def open_session(self) -> None:
        """Start reusing a pooled :class:`requests.Session` for subsequent calls."""
        if self._http._session is None:
            self._http._session = requests.Session()
            self._owns_session = True

    def close(self) -> None:
        """Close the session if this client created it. Safe to call multiple times."""
        if self._owns_session:
            self._http.close()
            self._owns_session = False

    def __enter__(self) -> "ApiClient":
        self.open_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ------------------------------------------------------------ operations
    def get(
        self,
        endpoint: str,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result[JsonObject]:
        """
        GET a single JSON object.

        A 2xx body that is not a JSON object is wrapped as ``{"data": body}``.

        :param endpoint: Path appended to the base URL, e.g. ``"/menu/42"``.
        :type endpoint: :class:`str`
        :param query_params: Optional query-string values.
        :type query_params: :class:`dict` | None
        :param token: Optional bearer token.
        :type token: :class:`str` | None
        :return: ``Success(dict)`` or ``ResultFailure``.
        """
        return self._execute("get", "GET", endpoint, self._handle_response, query_params, None, token)

    def get_list(
        self,
        endpoint: str,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result[List[Any]]:
        """
        GET a JSON array.

        Accepts either a bare array or an object with a list-typed ``data`` field.
        Any other 2xx body yields an empty list rather than a failure.
        """
        return self._execute("get_list", "GET", endpoint, self._handle_list_response, query_params, None, token)

    def post(
        self,
        endpoint: str,
        body: JsonObject,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result[JsonObject]:
        return self._execute("post", "POST", endpoint, self._handle_response, query_params, body, token)

    def put(
        self,
        endpoint: str,
        body: JsonObject,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result[JsonObject]:
        return self._execute("put", "PUT", endpoint, self._handle_response, query_params, body, token)

    def patch(
        self,
        endpoint: str,
        body: JsonObject,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result[JsonObject]:
        return self._execute("patch", "PATCH", endpoint, self._handle_response, query_params, body, token)

    def delete(
        self,
        endpoint: str,
        query_params: Optional[QueryParams] = None,
        token: Optional[str] = None,
    ) -> Result[JsonObject]:
        return self._execute("delete", "DELETE", endpoint, self._handle_response, query_params, None, token)

    # ------------------------------------------------------------ request building
    def _build_url(self, endpoint: str, query_params: Optional[QueryParams]) -> str:
        url = f"{self.base_url}{endpoint}"
        params = {k: _query_value(v) for k, v in (query_params or {}).items() if v is not None}
        if not params:
            return url
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{urlencode(params, doseq=True)}"

    def _build_headers(self, token: Optional[str]) -> Dict[str, str]:
        headers = dict(self.default_headers)
        if token is not None:
            headers[HEADER_AUTHORIZATION] = f"Bearer {token}"
        return headers

    def _execute(
        self,
        operation: str,
        method: str,
        endpoint: str,
        handler: Callable[[requests.Response], Result[Any]],
        query_params: Optional[QueryParams],
        body: Optional[JsonObject],
        token: Optional[str],
    ) -> Result[Any]:
        ctx = None
        response: Optional[requests.Response] = None
        try:
            url = self._build_url(endpoint, query_params)
            kwargs: Dict[str, Any] = {"headers": self._build_headers(token)}
            if body is not None:
                kwargs["data"] = json.dumps(body)
            with self._telemetry.trace_request(operation, method, url) as ctx:
                response = self._http._request(method, url, **kwargs)
            result = handler(response)
        except Exception as exc:
            result = ResultFailure(Failure.network(_describe(exc)))

        if ctx is not None:
            status_code = response.status_code if response is not None else None
            self._telemetry.record_response(ctx, status_code, result.failure_or_none)
        return result

    # ------------------------------------------------------------ response handling
    def _handle_response(self, response: requests.Response) -> Result[JsonObject]:
        return _decode(response).flat_map(
            lambda body: _classify(response.status_code, body, _as_object)
        )

    def _handle_list_response(self, response: requests.Response) -> Result[List[Any]]:
        return _decode(response).flat_map(
            lambda body: _classify(response.status_code, body, _as_list)
        )


def _decode(response: requests.Response) -> Result[Any]:
    """Reject HTML error pages, then parse the body as JSON. An empty body is a parse failure."""
    status_code = response.status_code
    content_type = (response.headers.get("Content-Type") or "").lower()
    text = response.text or ""
    if "text/html" in content_type or text.lstrip()[:9].upper() == "<!DOCTYPE":
        _LOG.warning("Server returned HTML instead of JSON (status %s)", status_code)
        return ResultFailure(Failure.server(f"Server returned HTML instead of JSON. Status: {status_code}"))
    try:
        return Success(json.loads(text))
    except (ValueError, RecursionError) as exc:
        # RecursionError: pathologically nested arrays/objects
        return ResultFailure(Failure.generic(f"Failed to parse response: {exc}"))


def _classify(status_code: int, body: Any, shape: Callable[[Any], Any]) -> Result[Any]:
    if 200 <= status_code < 300:
        return Success(shape(body))
    return ResultFailure(Failure(failure_kind_for_status(status_code), _error_message(status_code, body)))


def _as_object(body: Any) -> JsonObject:
    if isinstance(body, dict):
        return body
    return {"data": body}


def _as_list(body: Any) -> List[Any]:
    if isinstance(body, list):
        return body
    if isinstance(body, dict) and isinstance(body.get("data"), list):
        return body["data"]
    return []


def _error_message(status_code: int, body: Any) -> str:
    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if value is not None and str(value):
                return str(value)
    elif isinstance(body, str) and body:
        return body
    return f"Server error: {status_code}"


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (_dt.date, _dt.datetime)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_query_value(v) for v in value]
    return str(value)


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


__all__ = ["ApiClient"]
