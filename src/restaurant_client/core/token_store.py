# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Storage for the single opaque bearer token used to authenticate calls.

The client never inspects the token; it only saves it after login, reads it when
an operation is called without an explicit token, and clears it on logout.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Optional, Protocol, Union, runtime_checkable

_LOG = logging.getLogger(__name__)

_TOKEN_KEY = "auth_token"


@runtime_checkable
class TokenStore(Protocol):
    """Protocol for bearer token storage."""

    def get_token(self) -> Optional[str]:
        ...

    def save_token(self, token: str) -> None:
        ...

    def clear_token(self) -> None:
        ...


class InMemoryTokenStore:
    """Token store that lives as long as the process."""

    def __init__(self, token: Optional[str] = None) -> None:
        self._token = token
        self._lock = threading.Lock()

    def get_token(self) -> Optional[str]:
        with self._lock:
            return self._token

    def save_token(self, token: str) -> None:
        with self._lock:
            self._token = token

    def clear_token(self) -> None:
        with self._lock:
            self._token = None


class FileTokenStore:
    """
    Token store persisted as a small JSON document, ``{"auth_token": "..."}``.

    A missing or unreadable file reads as "no token". The file is written with
    owner-only permissions.

    :param path: Location of the token file.
    :type path: :class:`str` | :class:`pathlib.Path`
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def get_token(self) -> Optional[str]:
        with self._lock:
            try:
                data = json.loads(self.path.read_text(encoding="utf-8"))
            except FileNotFoundError:
                return None
            except (OSError, ValueError):
                _LOG.warning("Ignoring unreadable token file %s", self.path)
                return None
        token = data.get(_TOKEN_KEY) if isinstance(data, dict) else None
        return token if isinstance(token, str) and token else None

    def save_token(self, token: str) -> None:
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_name(self.path.name + ".tmp")
            fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump({_TOKEN_KEY: token}, fh)
            os.replace(tmp, self.path)

    def clear_token(self) -> None:
        with self._lock:
            try:
                self.path.unlink()
            except FileNotFoundError:
                pass


__all__ = ["TokenStore", "InMemoryTokenStore", "FileTokenStore"]
