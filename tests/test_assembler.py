"""Tests for assembling canonical mail records."""

from __future__ import annotations

from datetime import UTC, datetime

from mail_canon.core.models import DateHeader, Mail, Unstructured
from mail_canon.ingestion import ParsedMail
from mail_canon.normalization import assemble


def test_empty_record_materializes_sequences() -> None:
    mail = assemble(ParsedMail())

    assert mail == Mail(headers={})
    assert mail.to == mail.cc == mail.bcc == mail.reply_to == ()
    assert mail.references == ()
    assert mail.attachments == ()
    assert mail.from_ is None


def test_headers_are_classified_by_key() -> None:
    sent = datetime(2025, 10, 24, 10, 30, tzinfo=UTC)

    mail = assemble(ParsedMail(headers={"subject": "Hi", "date": sent}))

    assert dict(mail.headers) == {
        "subject": Unstructured("Hi"),
        "date": DateHeader(sent),
    }


def test_single_reference_is_wrapped() -> None:
    assert assemble(ParsedMail(references="msg1")).references == ("msg1",)
    assert assemble(ParsedMail(references=["a", "b"])).references == ("a", "b")
    assert assemble(ParsedMail(references=None)).references == ()


def test_recipients_are_always_sequences(address_object: dict[str, object]) -> None:
    single = assemble(ParsedMail(to=address_object))
    listed = assemble(ParsedMail(to=[address_object]))

    assert single.to == listed.to
    assert len(single.to) == 1


def test_from_is_a_single_optional_value(address_object: dict[str, object]) -> None:
    mail = assemble(ParsedMail(from_=[address_object, address_object]))

    assert mail.from_ is not None
    assert mail.from_.text == "User <user@example.com>"


def test_html_tri_state_is_preserved() -> None:
    assert assemble(ParsedMail(html="<p>x</p>")).html == "<p>x</p>"
    assert assemble(ParsedMail(html=False)).html is False
    assert assemble(ParsedMail(html=None)).html is None


def test_attachments_are_normalized() -> None:
    mail = assemble(
        ParsedMail(
            attachments=[
                {
                    "content_type": "text/plain",
                    "checksum": "c",
                    "size": 5,
                    "content": b"hello",
                }
            ]
        )
    )

    assert [attachment.content for attachment in mail.attachments] == ["aGVsbG8="]
