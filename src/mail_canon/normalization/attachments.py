"""Normalization of attachment records."""

from __future__ import annotations

import base64
import math
from collections.abc import Mapping
from typing import Any

from ..core.models import Attachment


def _optional_str(value: Any) -> str | None:
    return str(value) if value else None


def _size(value: Any) -> float:
    """Coerce a size to a number; unreadable sizes become NaN and render as null."""
    if value is None:
        return 0
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return math.nan


def normalize_attachment(raw: Mapping[str, Any]) -> Attachment:
    """Normalize a raw attachment, base64 encoding its binary content."""
    content = raw.get("content")
    encoded = base64.b64encode(content).decode("ascii") if content is not None else None
    return Attachment(
        filename=_optional_str(raw.get("filename")),
        content_type=str(raw.get("content_type") or ""),
        content_disposition=_optional_str(raw.get("content_disposition")),
        checksum=str(raw.get("checksum") or ""),
        size=_size(raw.get("size")),
        content=encoded,
        cid=_optional_str(raw.get("cid")),
        related=bool(raw.get("related")),
    )


def normalize_attachments(raw: Any) -> tuple[Attachment, ...]:
    """Normalize every attachment; absent input yields an empty tuple."""
    return tuple(normalize_attachment(entry) for entry in raw or ())


__all__ = ["normalize_attachment", "normalize_attachments"]
