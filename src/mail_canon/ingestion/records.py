"""Loosely typed mail record handed over by the mail parsing stage."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, TypeAlias, TypedDict


class RawAddress(TypedDict, total=False):
    """One mailbox as produced by the parser; either key may be missing."""

    address: str | None
    name: str | None


class RawAddressObject(TypedDict, total=False):
    """Address header payload: mailboxes plus display renderings."""

    value: list[RawAddress]
    html: str
    text: str


class RawAttachment(TypedDict, total=False):
    """Attachment as produced by the parser, content still in raw bytes."""

    filename: str | None
    content_type: str
    content_disposition: str | None
    checksum: str
    size: int
    content: bytes | None
    cid: str | None
    related: bool | None


RawAddressField: TypeAlias = RawAddressObject | Sequence[RawAddressObject] | None


# pylint: disable=too-many-instance-attributes
@dataclass(slots=True)
class ParsedMail:
    """Parsed message before normalization.

    ``headers`` maps each header name to its parsed value; the value shape
    depends on the header and is not guaranteed (strings, datetimes, address
    objects, ``{"value", "params"}`` mappings or lists of any of these).
    """

    headers: Mapping[str, Any] = field(default_factory=dict)
    subject: str | None = None
    from_: RawAddressField = None
    to: RawAddressField = None
    cc: RawAddressField = None
    bcc: RawAddressField = None
    reply_to: RawAddressField = None
    date: datetime | None = None
    message_id: str | None = None
    in_reply_to: str | None = None
    references: str | Sequence[str] | None = None
    text: str | None = None
    html: str | bool | None = None
    text_as_html: str | None = None
    attachments: Sequence[RawAttachment] = field(default_factory=list)


__all__ = [
    "ParsedMail",
    "RawAddress",
    "RawAddressField",
    "RawAddressObject",
    "RawAttachment",
]
