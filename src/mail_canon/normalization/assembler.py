"""Assembly of the canonical :class:`Mail` from a parsed mail record."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import MappingProxyType

from ..core.models import HeaderValue, HtmlBody, Mail
from ..ingestion.records import ParsedMail
from .addresses import normalize_addresses, normalize_from
from .attachments import normalize_attachments
from .headers import classify

LOGGER = logging.getLogger(__name__)


def _references(raw: str | Sequence[str] | None) -> tuple[str, ...]:
    if not raw:
        return ()
    if isinstance(raw, str):
        return (raw,)
    return tuple(str(reference) for reference in raw)


def _html(raw: str | bool | None) -> HtmlBody:
    if raw is None or isinstance(raw, str):
        return raw
    if raw is False:
        return False
    return None


def assemble(parsed: ParsedMail) -> Mail:
    """Normalize every field of ``parsed`` into a canonical :class:`Mail`."""
    headers: dict[str, HeaderValue] = {
        key: classify(key, value) for key, value in parsed.headers.items()
    }
    mail = Mail(
        headers=MappingProxyType(headers),
        subject=parsed.subject,
        from_=normalize_from(parsed.from_),
        to=normalize_addresses(parsed.to),
        cc=normalize_addresses(parsed.cc),
        bcc=normalize_addresses(parsed.bcc),
        reply_to=normalize_addresses(parsed.reply_to),
        date=parsed.date,
        message_id=parsed.message_id,
        in_reply_to=parsed.in_reply_to,
        references=_references(parsed.references),
        text=parsed.text,
        html=_html(parsed.html),
        text_as_html=parsed.text_as_html,
        attachments=normalize_attachments(parsed.attachments),
    )
    LOGGER.debug(
        "Assembled mail with %d header(s) and %d attachment(s)",
        len(mail.headers),
        len(mail.attachments),
    )
    return mail


__all__ = ["assemble"]
