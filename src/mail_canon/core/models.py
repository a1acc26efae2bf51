"""Canonical, closed mail model produced by normalization."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Literal, TypeAlias


@dataclass(frozen=True, slots=True)
class Address:
    """A single mailbox inside an address header."""

    address: str | None
    name: str = ""


@dataclass(frozen=True, slots=True)
class AddressObject:
    """Parsed address header: its mailboxes plus rendered text/html forms."""

    value: tuple[Address, ...]
    html: str
    text: str


# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True, slots=True)
class Attachment:
    """Attachment metadata with base64 encoded content."""

    filename: str | None
    content_type: str
    content_disposition: str | None
    checksum: str
    size: float
    content: str | None
    cid: str | None
    related: bool = False


@dataclass(frozen=True, slots=True)
class ParameterizedValue:
    """Content type or disposition value with optional ``key=value`` parameters."""

    value: str
    params: Mapping[str, str] | None = None


@dataclass(frozen=True, slots=True)
class Received:
    """Trace fields of a ``Received`` header."""

    from_: str | None = None
    by: str | None = None
    via: str | None = None
    with_: str | None = None
    id: str | None = None
    for_: str | None = None
    date: datetime | None = None


@dataclass(frozen=True, slots=True)
class Unstructured:
    tag: ClassVar[str] = "unstructured"
    value: str


@dataclass(frozen=True, slots=True)
class DateHeader:
    """``value`` is ``None`` when the raw value could not be read as a timestamp."""

    tag: ClassVar[str] = "date"
    value: datetime | None


@dataclass(frozen=True, slots=True)
class AddressHeader:
    tag: ClassVar[str] = "address"
    value: AddressObject


@dataclass(frozen=True, slots=True)
class AddressListHeader:
    tag: ClassVar[str] = "address_list"
    value: tuple[AddressObject, ...]


@dataclass(frozen=True, slots=True)
class MessageIdHeader:
    tag: ClassVar[str] = "message_id"
    value: str


@dataclass(frozen=True, slots=True)
class MessageIdListHeader:
    tag: ClassVar[str] = "message_id_list"
    value: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ContentTypeHeader:
    tag: ClassVar[str] = "content_type"
    value: ParameterizedValue


@dataclass(frozen=True, slots=True)
class MimeVersionHeader:
    tag: ClassVar[str] = "mime_version"
    value: str


@dataclass(frozen=True, slots=True)
class ContentEncodingHeader:
    tag: ClassVar[str] = "content_encoding"
    value: str


@dataclass(frozen=True, slots=True)
class ContentDispositionHeader:
    tag: ClassVar[str] = "content_disposition"
    value: ParameterizedValue


@dataclass(frozen=True, slots=True)
class ReceivedHeader:
    tag: ClassVar[str] = "received"
    value: Received


@dataclass(frozen=True, slots=True)
class KeywordsHeader:
    tag: ClassVar[str] = "keywords"
    value: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class UnknownHeader:
    tag: ClassVar[str] = "unknown"
    value: str


HeaderValue: TypeAlias = (
    Unstructured
    | DateHeader
    | AddressHeader
    | AddressListHeader
    | MessageIdHeader
    | MessageIdListHeader
    | ContentTypeHeader
    | MimeVersionHeader
    | ContentEncodingHeader
    | ContentDispositionHeader
    | ReceivedHeader
    | KeywordsHeader
    | UnknownHeader
)

# ``False`` marks a message the parser found to have no HTML body at all.
HtmlBody: TypeAlias = str | Literal[False] | None


# pylint: disable=too-many-instance-attributes
@dataclass(frozen=True, slots=True)
class Mail:
    """Normalized mail ready for conversion into a value tree."""

    headers: Mapping[str, HeaderValue]
    subject: str | None = None
    from_: AddressObject | None = None
    to: tuple[AddressObject, ...] = ()
    cc: tuple[AddressObject, ...] = ()
    bcc: tuple[AddressObject, ...] = ()
    reply_to: tuple[AddressObject, ...] = ()
    date: datetime | None = None
    message_id: str | None = None
    in_reply_to: str | None = None
    references: tuple[str, ...] = ()
    text: str | None = None
    html: HtmlBody = None
    text_as_html: str | None = None
    attachments: tuple[Attachment, ...] = ()


__all__ = [
    "Address",
    "AddressHeader",
    "AddressListHeader",
    "AddressObject",
    "Attachment",
    "ContentDispositionHeader",
    "ContentEncodingHeader",
    "ContentTypeHeader",
    "DateHeader",
    "HeaderValue",
    "HtmlBody",
    "KeywordsHeader",
    "Mail",
    "MessageIdHeader",
    "MessageIdListHeader",
    "MimeVersionHeader",
    "ParameterizedValue",
    "Received",
    "ReceivedHeader",
    "UnknownHeader",
    "Unstructured",
]
