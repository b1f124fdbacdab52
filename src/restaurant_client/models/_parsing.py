# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Optional


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as sent by the API; ``None`` if absent or malformed."""
    if not isinstance(value, str) or not value:
        return None
    text = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def string_id(data: dict) -> str:
    """Backend ids arrive as ``_id``; fall back to ``id``."""
    raw = data.get("_id", data.get("id"))
    return "" if raw is None else str(raw)


def parse_float(value: Any, default: float) -> float:
    """Read a number sent as a JSON number or numeric string; ``default`` otherwise."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def parse_int(value: Any, default: int) -> int:
    """Like :func:`parse_float`, truncated to an integer."""
    number = parse_float(value, float("nan"))
    return int(number) if math.isfinite(number) else default
