"""Rendering of values embedded in failure messages."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any


def _format_timedelta(value: timedelta) -> str:
    if value == timedelta(0):
        return "0s"

    sign = "-" if value < timedelta(0) else ""
    remaining = abs(value)
    days = remaining.days
    hours, rest = divmod(remaining.seconds, 3600)
    minutes, seconds = divmod(rest, 60)

    parts = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if seconds or remaining.microseconds:
        if remaining.microseconds:
            frac = f"{remaining.microseconds:06d}".rstrip("0")
            parts.append(f"{seconds}.{frac}s")
        else:
            parts.append(f"{seconds}s")
    return sign + " ".join(parts)


def format_value(value: Any) -> str:
    """Render *value* the way it appears inside an assertion message."""
    if value is None:
        return "<null>"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, datetime):
        fmt = "%Y-%m-%d %H:%M:%S.%f" if value.microsecond else "%Y-%m-%d %H:%M:%S"
        return f"<{value.strftime(fmt)}>"
    if isinstance(value, date):
        return f"<{value.isoformat()}>"
    if isinstance(value, timedelta):
        return f"<{_format_timedelta(value)}>"
    return f"<{value}>"
