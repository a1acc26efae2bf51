"""Datetime helpers shared across the application."""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

__all__ = [
    "coerce_datetime",
    "ensure_utc",
    "serialize_datetime",
]

LOGGER = logging.getLogger(__name__)


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` in UTC, treating naive values as already UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def serialize_datetime(value: datetime) -> str:
    """Render ``value`` as ISO 8601 UTC with millisecond precision and ``Z``."""
    utc_value = ensure_utc(value)
    millis = utc_value.microsecond // 1000
    return f"{utc_value:%Y-%m-%dT%H:%M:%S}.{millis:03d}Z"


def coerce_datetime(value: object) -> datetime | None:
    """Best-effort conversion of a loosely typed value into a timestamp.

    Integers and floats are epoch milliseconds. Strings are tried as RFC 2822
    dates first and ISO 8601 second. Anything that cannot be read returns
    ``None`` instead of raising.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return _from_epoch_millis(value)
    if isinstance(value, str):
        return _parse_text(value.strip())
    LOGGER.debug("Cannot coerce %s to a timestamp", type(value).__name__)
    return None


def _from_epoch_millis(millis: int | float) -> datetime | None:
    try:
        seconds = float(millis) / 1000
        if not math.isfinite(seconds):
            return None
        return datetime.fromtimestamp(seconds, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return None


def _parse_text(text: str) -> datetime | None:
    if not text:
        return None
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError, OverflowError):
        pass
    try:
        return datetime.fromisoformat(text)
    except (ValueError, OverflowError):
        LOGGER.debug("Unparseable timestamp text: %r", text)
        return None
