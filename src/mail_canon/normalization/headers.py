"""Classification of raw header values into the closed header union."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from ..core.datetime_utils import coerce_datetime, serialize_datetime
from ..core.models import (
    AddressHeader,
    AddressListHeader,
    ContentDispositionHeader,
    ContentEncodingHeader,
    ContentTypeHeader,
    DateHeader,
    HeaderValue,
    KeywordsHeader,
    MessageIdHeader,
    MessageIdListHeader,
    MimeVersionHeader,
    ParameterizedValue,
    Received,
    ReceivedHeader,
    UnknownHeader,
    Unstructured,
)
from .addresses import normalize_address_object

LOGGER = logging.getLogger(__name__)

SINGLE_SENDER_KEYS = frozenset({"from", "sender"})
SINGLE_SENDER_PREFIXES = ("resent-from", "resent-sender")
RECIPIENT_KEYS = frozenset({"to", "cc", "bcc", "reply-to"})
RECIPIENT_PREFIXES = ("resent-to", "resent-cc", "resent-bcc")
RECEIVED_FIELDS = ("from", "by", "via", "with", "id", "for")


def stringify(value: Any) -> str:
    """Render an arbitrary raw header value as text."""
    # pylint: disable=too-many-return-statements
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return serialize_datetime(value)
    if isinstance(value, bytes | bytearray):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, list | tuple):
        return ",".join(stringify(item) for item in value)
    if isinstance(value, Mapping):
        return json.dumps(
            {str(k): v for k, v in value.items()},
            sort_keys=True,
            default=stringify,
            separators=(",", ":"),
        )
    return str(value)


def _matches(key: str, exact: frozenset[str], prefixes: tuple[str, ...]) -> bool:
    return key in exact or key.startswith(prefixes)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, list | tuple)


def _parameterized(value: Any) -> ParameterizedValue:
    if isinstance(value, Mapping) and value.get("value"):
        params = value.get("params")
        return ParameterizedValue(
            value=stringify(value["value"]),
            params=(
                MappingProxyType({str(k): stringify(v) for k, v in params.items()})
                if isinstance(params, Mapping)
                else None
            ),
        )
    return ParameterizedValue(value=stringify(value))


def _message_ids(value: Any) -> tuple[str, ...]:
    if _is_sequence(value):
        return tuple(stringify(item) for item in value)
    if value:
        return (stringify(value),)
    return ()


def _keywords(value: Any) -> tuple[str, ...]:
    if _is_sequence(value):
        return tuple(stringify(item) for item in value)
    if isinstance(value, str):
        return tuple(keyword.strip() for keyword in value.split(","))
    return (stringify(value),)


def _received(value: Mapping[str, Any]) -> Received:
    fields = {
        name: stringify(value[name]) if value.get(name) else None
        for name in RECEIVED_FIELDS
    }
    raw_date = value.get("date")
    return Received(
        from_=fields["from"],
        by=fields["by"],
        via=fields["via"],
        with_=fields["with"],
        id=fields["id"],
        for_=fields["for"],
        date=coerce_datetime(raw_date) if raw_date is not None else None,
    )


def classify(key: str, value: Any) -> HeaderValue:
    """Classify a raw ``(key, value)`` header pair.

    Rules are tried in a fixed order and the first match wins; anything not
    recognised becomes :class:`UnknownHeader` holding the stringified value.
    The function never raises and keeps no state between calls.
    """
    # pylint: disable=too-many-return-statements,too-many-branches
    name = key.lower()

    if name == "date" or name.startswith("resent-date") or isinstance(value, datetime):
        return DateHeader(coerce_datetime(value))

    if _matches(name, SINGLE_SENDER_KEYS, SINGLE_SENDER_PREFIXES) and isinstance(
        value, Mapping
    ):
        return AddressHeader(normalize_address_object(value))

    if _matches(name, RECIPIENT_KEYS, RECIPIENT_PREFIXES):
        if isinstance(value, Mapping):
            return AddressListHeader((normalize_address_object(value),))
        if _is_sequence(value) and all(isinstance(item, Mapping) for item in value):
            return AddressListHeader(
                tuple(normalize_address_object(item) for item in value)
            )

    if name == "message-id" or name.startswith("resent-message-id"):
        return MessageIdHeader(stringify(value))

    if name in ("references", "in-reply-to"):
        return MessageIdListHeader(_message_ids(value))

    if name == "content-type":
        return ContentTypeHeader(_parameterized(value))

    if name == "mime-version":
        return MimeVersionHeader(stringify(value))

    if name == "content-transfer-encoding":
        return ContentEncodingHeader(stringify(value))

    if name == "content-disposition":
        return ContentDispositionHeader(_parameterized(value))

    if name == "keywords":
        return KeywordsHeader(_keywords(value))

    if name in ("subject", "comments"):
        return Unstructured(stringify(value))

    if name == "received" and isinstance(value, Mapping):
        return ReceivedHeader(_received(value))

    LOGGER.debug("Header %r classified as unknown", key)
    return UnknownHeader(stringify(value))


__all__ = ["classify", "stringify"]
