# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
User account model.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ._parsing import string_id


@dataclass(frozen=True)
class User:
    """
    Account as returned by ``/auth/me``, ``/auth/login`` and ``/users``.

    :param id: Backend identifier (``_id`` on the wire).
    :type id: str
    :param name: Display name.
    :type name: str
    :param email: Login e-mail.
    :type email: str
    :param role: One of the backend roles, for example ``"admin"`` or ``"waiter"``.
    :type role: str
    :param phone: Optional phone number.
    :type phone: str | None
    :param is_active: Whether the account may log in.
    :type is_active: bool

    Example::

        user = client.users.get(user_id).map(User.from_dict)
    """

    id: str
    name: str
    email: str
    role: str = "customer"
    phone: Optional[str] = None
    is_active: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        phone = data.get("phone")
        return cls(
            id=string_id(data),
            name=data.get("name") or "",
            email=data.get("email") or "",
            role=data.get("role") or "customer",
            phone=str(phone) if phone is not None else None,
            is_active=bool(data.get("isActive", True)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "phone": self.phone,
            "isActive": self.is_active,
        }
