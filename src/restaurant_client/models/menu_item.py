# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Menu item model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ._parsing import format_timestamp, parse_float, parse_int, parse_timestamp, string_id


@dataclass(frozen=True)
class MenuItem:
    """
    Dish on the menu as returned by ``/menu``.

    :param id: Backend identifier (``_id`` on the wire).
    :type id: str
    :param price: Price in the restaurant's currency.
    :type price: float
    :param category: Category id or name, as sent by the backend.
    :type category: str
    :param dietary_tags: Tags such as ``"vegan"`` or ``"gluten-free"``.
    :type dietary_tags: list[str]
    :param preparation_time: Minutes to prepare (default 15).
    :type preparation_time: int

    Example::

        items = client.menu.list(available=True).map(
            lambda rows: [MenuItem.from_dict(r) for r in rows]
        )
    """

    id: str
    name: str
    description: str = ""
    price: float = 0.0
    category: str = ""
    dietary_tags: List[str] = field(default_factory=list)
    availability: bool = True
    preparation_time: int = 15
    chef_special: bool = False
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MenuItem":
        category = data.get("category")
        # Populated categories arrive as objects
        if isinstance(category, dict):
            category = category.get("name") or string_id(category)
        image_url = data.get("imageUrl")
        return cls(
            id=string_id(data),
            name=data.get("name") or "",
            description=data.get("description") or "",
            price=parse_float(data.get("price"), 0.0),
            category="" if category is None else str(category),
            dietary_tags=[str(t) for t in data.get("dietaryTags") or []],
            availability=bool(data.get("availability", True)),
            preparation_time=parse_int(data.get("preparationTime"), 15),
            chef_special=bool(data.get("chefSpecial", False)),
            image_url=str(image_url) if image_url is not None else None,
            created_at=parse_timestamp(data.get("createdAt")),
            updated_at=parse_timestamp(data.get("updatedAt")),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "_id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "dietaryTags": list(self.dietary_tags),
            "availability": self.availability,
            "preparationTime": self.preparation_time,
            "chefSpecial": self.chef_special,
        }
        if self.image_url is not None:
            out["imageUrl"] = self.image_url
        if self.created_at is not None:
            out["createdAt"] = format_timestamp(self.created_at)
        if self.updated_at is not None:
            out["updatedAt"] = format_timestamp(self.updated_at)
        return out
