"""Utilities for parsing raw RFC822 messages into loosely typed mail records."""

from __future__ import annotations

import hashlib
import html
import re
from collections.abc import Iterable, Iterator
from email import policy
from email.headerregistry import (
    Address as HeaderAddress,
    AddressHeader,
    ContentDispositionHeader,
    ContentTypeHeader,
    DateHeader,
)
from email.message import EmailMessage
from email.parser import BytesParser
from typing import Any

from .records import (
    ParsedMail,
    RawAddress,
    RawAddressField,
    RawAddressObject,
    RawAttachment,
)

_PARAGRAPH_SPLIT = re.compile(r"\n\s*\n")


class EmptyInputError(ValueError):
    """Raised when no message bytes were supplied."""


class EmailParser:
    """Convert raw RFC822 payloads into :class:`ParsedMail` records."""

    def __init__(self) -> None:
        """Prepare internal parser instance."""
        self._parser = BytesParser(policy=policy.default)

    def parse(self, payload: bytes) -> ParsedMail:
        """Parse raw RFC822 bytes into a :class:`ParsedMail`."""
        if not payload:
            raise EmptyInputError("No data received")
        message = self._parser.parsebytes(payload)
        if not isinstance(message, EmailMessage):
            raise TypeError("Parser did not produce an EmailMessage")

        headers = _collect_headers(message)
        date_header = message.get("Date")
        text, html_body = _extract_bodies(message)

        return ParsedMail(
            headers=headers,
            subject=_optional_str(message.get("Subject")),
            from_=_address_field(message.get_all("From", [])),
            to=_address_field(message.get_all("To", [])),
            cc=_address_field(message.get_all("Cc", [])),
            bcc=_address_field(message.get_all("Bcc", [])),
            reply_to=_address_field(message.get_all("Reply-To", [])),
            date=date_header.datetime if isinstance(date_header, DateHeader) else None,
            message_id=_optional_str(message.get("Message-ID")),
            in_reply_to=_optional_str(message.get("In-Reply-To")),
            references=_split_references(message.get("References")),
            text=text,
            html=html_body if html_body is not None else False,
            text_as_html=_text_to_html(text) if text is not None else None,
            attachments=list(_collect_attachments(message)),
        )


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value).strip()


def _collect_headers(message: EmailMessage) -> dict[str, Any]:
    """Return headers keyed by lowercase name, repeated headers as lists."""
    headers: dict[str, Any] = {}
    for name, header in message.items():
        key = name.lower()
        value = _header_value(key, header)
        if key not in headers:
            headers[key] = value
        elif isinstance(headers[key], list):
            headers[key].append(value)
        else:
            headers[key] = [headers[key], value]
    return headers


def _header_value(key: str, header: Any) -> Any:
    # pylint: disable=too-many-return-statements
    if isinstance(header, DateHeader):
        return header.datetime if header.datetime is not None else str(header)
    if isinstance(header, AddressHeader):
        return _address_object(header)
    if isinstance(header, ContentTypeHeader):
        return {"value": header.content_type, "params": dict(header.params)}
    if isinstance(header, ContentDispositionHeader):
        disposition = header.content_disposition
        if disposition is None:
            return str(header)
        return {"value": disposition, "params": dict(header.params)}
    if key == "references":
        return _split_references(header)
    return str(header).strip()


def _address_object(header: AddressHeader) -> RawAddressObject:
    mailboxes: list[RawAddress] = [
        {"address": mailbox.addr_spec or None, "name": mailbox.display_name}
        for mailbox in header.addresses
    ]
    return {
        "value": mailboxes,
        "html": ", ".join(_address_html(mailbox) for mailbox in header.addresses),
        "text": str(header).strip(),
    }


def _address_html(mailbox: HeaderAddress) -> str:
    address = html.escape(mailbox.addr_spec)
    link = f'<a href="mailto:{address}" class="mp_address_email">{address}</a>'
    if not mailbox.display_name:
        return f'<span class="mp_address_group">{link}</span>'
    name = html.escape(mailbox.display_name)
    return (
        '<span class="mp_address_group">'
        f'<span class="mp_address_name">{name}</span> &lt;{link}&gt;</span>'
    )


def _address_field(headers: list[Any]) -> RawAddressField:
    objects = [
        _address_object(header)
        for header in headers
        if isinstance(header, AddressHeader)
    ]
    if not objects:
        return None
    if len(objects) == 1:
        return objects[0]
    return objects


def _split_references(header: Any) -> str | list[str] | None:
    if header is None:
        return None
    ids = str(header).split()
    if not ids:
        return None
    if len(ids) == 1:
        return ids[0]
    return ids


def _collapse_chunks(chunks: Iterable[str], separator: str) -> str | None:
    filtered_chunks = [chunk for chunk in chunks if chunk]
    if not filtered_chunks:
        return None
    return separator.join(filtered_chunks)


def _extract_bodies(message: EmailMessage) -> tuple[str | None, str | None]:
    plain_chunks: list[str] = []
    html_chunks: list[str] = []

    for part in message.walk():
        if part.is_multipart():
            continue
        if part.get_content_disposition() == "attachment":
            continue
        content_type = part.get_content_type()
        if content_type not in ("text/plain", "text/html"):
            continue
        try:
            content_obj = part.get_content()
        except LookupError:
            continue
        if not isinstance(content_obj, str):
            continue
        if content_type == "text/plain":
            plain_chunks.append(content_obj)
        else:
            html_chunks.append(content_obj)

    text = _collapse_chunks(plain_chunks, "\n")
    html_body = _collapse_chunks(html_chunks, "\n")
    return text, html_body


def _text_to_html(text: str) -> str:
    paragraphs = _PARAGRAPH_SPLIT.split(text.strip())
    rendered = (
        "<p>"
        + "<br/>".join(html.escape(line) for line in paragraph.splitlines())
        + "</p>"
        for paragraph in paragraphs
        if paragraph.strip()
    )
    return "".join(rendered)


def _walk_leaves(
    part: EmailMessage, parent_type: str | None = None
) -> Iterator[tuple[EmailMessage, str | None]]:
    """Yield non-multipart parts paired with their direct parent's content type."""
    if part.is_multipart():
        for child in part.iter_parts():
            if isinstance(child, EmailMessage):
                yield from _walk_leaves(child, part.get_content_type())
        return
    yield part, parent_type


def _is_body_part(part: EmailMessage) -> bool:
    if part.get_content_disposition() is not None or part.get_filename():
        return False
    return part.get_content_type() in ("text/plain", "text/html")


def _collect_attachments(message: EmailMessage) -> Iterator[RawAttachment]:
    for part, parent_type in _walk_leaves(message):
        if part is message or _is_body_part(part):
            continue
        payload = part.get_payload(decode=True)
        content = payload if isinstance(payload, bytes) else b""
        disposition = part.get_content_disposition()
        cid = part.get("Content-ID")
        yield {
            "filename": part.get_filename(),
            "content_type": part.get_content_type(),
            "content_disposition": disposition,
            "checksum": hashlib.md5(content).hexdigest(),
            "size": len(content),
            "content": content,
            "cid": str(cid).strip().strip("<>") if cid else None,
            "related": (
                parent_type == "multipart/related" and disposition != "attachment"
            ),
        }


__all__ = ["EmailParser", "EmptyInputError"]
