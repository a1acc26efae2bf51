"""Tests for converting canonical mail into value trees."""

from __future__ import annotations

from datetime import UTC, datetime
from types import MappingProxyType

from mail_canon.conversion import AstnBuilder, JsonValueBuilder, convert, to_astn
from mail_canon.conversion.astn import NOTHING, Dictionary, Group, State, Text
from mail_canon.conversion.values import (
    NULL,
    Array,
    Boolean,
    Number,
    Object,
    String,
    Value,
)
from mail_canon.core.models import (
    Address,
    AddressObject,
    Attachment,
    ContentTypeHeader,
    DateHeader,
    Mail,
    ParameterizedValue,
    Received,
    ReceivedHeader,
)

OCT_24 = datetime(2025, 10, 24, 10, 30, tzinfo=UTC)

MAIL_KEYS = {
    "headers",
    "subject",
    "from",
    "to",
    "cc",
    "bcc",
    "replyTo",
    "date",
    "messageId",
    "inReplyTo",
    "references",
    "text",
    "html",
    "textAsHtml",
    "attachments",
}


def _entries(value: Value) -> dict[str, Value]:
    assert isinstance(value, Object)
    return dict(value.entries)


def test_absent_optionals_are_explicit_nulls() -> None:
    entries = _entries(convert(Mail(headers={})))

    assert set(entries) == MAIL_KEYS
    for key in ("subject", "from", "date", "messageId", "inReplyTo", "text"):
        assert entries[key] == NULL
    for key in ("to", "cc", "bcc", "replyTo", "references", "attachments"):
        assert entries[key] == Array(())
    assert entries["headers"] == Object({})


def test_present_optionals_are_converted() -> None:
    sender = AddressObject(
        value=(Address(address=None, name="Anon"),), html="h", text="t"
    )
    entries = _entries(
        convert(
            Mail(
                headers={},
                subject="Hi",
                from_=sender,
                date=OCT_24,
                message_id="<1@x>",
                references=("<0@x>",),
                html="<p>x</p>",
            )
        )
    )

    assert entries["subject"] == String("Hi")
    assert entries["date"] == String("2025-10-24T10:30:00.000Z")
    assert entries["messageId"] == String("<1@x>")
    assert entries["references"] == Array((String("<0@x>"),))
    assert entries["html"] == String("<p>x</p>")
    assert entries["from"] == Object(
        {
            "value": Array(
                (Object({"address": NULL, "name": String("Anon")}),)
            ),
            "html": String("h"),
            "text": String("t"),
        }
    )


def test_missing_html_body_converts_to_null() -> None:
    assert _entries(convert(Mail(headers={}, html=False)))["html"] == NULL


def test_header_variants_become_tag_payload_pairs() -> None:
    headers = {
        "date": DateHeader(OCT_24),
        "content-type": ContentTypeHeader(
            ParameterizedValue("text/plain", MappingProxyType({"charset": "utf-8"}))
        ),
        "received": ReceivedHeader(Received(by="mx")),
    }

    converted = _entries(_entries(convert(Mail(headers=headers)))["headers"])

    assert converted["date"] == Array(
        (String("date"), String("2025-10-24T10:30:00.000Z"))
    )
    assert converted["content-type"] == Array(
        (
            String("content_type"),
            Object(
                {
                    "value": String("text/plain"),
                    "params": Object({"charset": String("utf-8")}),
                }
            ),
        )
    )
    received = converted["received"]
    assert isinstance(received, Array)
    assert _entries(received.items[1]) == {
        "from": NULL,
        "by": String("mx"),
        "via": NULL,
        "with": NULL,
        "id": NULL,
        "for": NULL,
        "date": NULL,
    }


def test_attachment_conversion() -> None:
    attachment = Attachment(
        filename=None,
        content_type="text/plain",
        content_disposition=None,
        checksum="c",
        size=5,
        content="aGVsbG8=",
        cid=None,
    )

    attachments = _entries(convert(Mail(headers={}, attachments=(attachment,))))[
        "attachments"
    ]

    assert attachments == Array(
        (
            Object(
                {
                    "filename": NULL,
                    "contentType": String("text/plain"),
                    "contentDisposition": NULL,
                    "checksum": String("c"),
                    "size": Number(5),
                    "content": String("aGVsbG8="),
                    "cid": NULL,
                    "related": Boolean(False),
                }
            ),
        )
    )


def test_non_finite_numbers_become_null() -> None:
    builder = JsonValueBuilder()

    assert builder.number(float("inf")) == NULL
    assert builder.number(float("nan")) == NULL
    assert builder.number(2.5) == Number(2.5)
    assert AstnBuilder().number(float("-inf")) == NOTHING


def test_astn_conversion_uses_states_and_groups() -> None:
    tree = to_astn(Mail(headers={"date": DateHeader(OCT_24)}, subject="Hi"))

    assert isinstance(tree, Group)
    assert tree.fields["subject"] == Text("Hi")
    assert tree.fields["from"] == NOTHING
    headers = tree.fields["headers"]
    assert isinstance(headers, Dictionary)
    assert headers.entries["date"] == State("date", Text("2025-10-24T10:30:00.000Z"))
