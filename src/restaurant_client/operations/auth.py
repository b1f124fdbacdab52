# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Authentication operations namespace."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..common.constants import (
    AUTH_CHANGE_PASSWORD,
    AUTH_LOGIN,
    AUTH_ME,
    AUTH_REGISTER,
    AUTH_UPDATE,
)
from ..core.api_client import JsonObject
from ..core.errors import Failure
from ..core.results import Result, ResultFailure, Success
from ..models.user import User
from ._base import _Operations


class AuthOperations(_Operations):
    """
    Login, registration and profile management.

    Accessed via ``client.auth``. A successful :meth:`login` or :meth:`register`
    saves the returned token in the client's token store, so later calls made
    without an explicit token are authenticated.

    Example::

        result = client.auth.login("chef@example.com", "secret")
        result.fold(
            on_success=lambda user: print(f"Welcome {user.name}"),
            on_failure=lambda failure: print(failure.message),
        )
        client.menu.list()  # uses the saved token
        client.auth.logout()
    """

    def login(self, email: str, password: str) -> Result[User]:
        result = self._api.post(AUTH_LOGIN, {"email": email, "password": password})
        return result.flat_map(self._store_session)

    def register(self, name: str, email: str, password: str, role: str = "customer") -> Result[User]:
        payload = {"name": name, "email": email, "password": password, "role": role}
        return self._api.post(AUTH_REGISTER, payload).flat_map(self._store_session)

    def me(self, token: Optional[str] = None) -> Result[User]:
        return self._api.get(AUTH_ME, token=self._token(token)).map(_user_payload)

    def update_profile(self, changes: JsonObject, token: Optional[str] = None) -> Result[User]:
        return self._api.put(AUTH_UPDATE, changes, token=self._token(token)).map(_user_payload)

    def change_password(
        self,
        current_password: str,
        new_password: str,
        token: Optional[str] = None,
    ) -> Result[JsonObject]:
        payload = {"currentPassword": current_password, "newPassword": new_password}
        return self._api.put(AUTH_CHANGE_PASSWORD, payload, token=self._token(token))

    def logout(self) -> None:
        """Forget the stored token. No request is sent."""
        self._client.token_store.clear_token()

    def _store_session(self, body: Dict[str, Any]) -> Result[User]:
        token = body.get("token")
        user = body.get("user")
        if not isinstance(token, str) or not token or not isinstance(user, dict):
            return ResultFailure(Failure.generic("Authentication response is missing token or user"))
        self._client.token_store.save_token(token)
        return Success(User.from_dict(user))


def _user_payload(body: Dict[str, Any]) -> User:
    # Endpoints answer either with the user itself or wrapped as {"user": {...}}
    user = body.get("user")
    if not isinstance(user, dict):
        user = body.get("data") if isinstance(body.get("data"), dict) else body
    return User.from_dict(user)
