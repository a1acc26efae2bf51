"""Conversion of the canonical mail model into output value trees."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Generic, Protocol, TypeVar, assert_never

from ..core.datetime_utils import serialize_datetime
from ..core.models import (
    Address,
    AddressHeader,
    AddressListHeader,
    AddressObject,
    Attachment,
    ContentDispositionHeader,
    ContentEncodingHeader,
    ContentTypeHeader,
    DateHeader,
    HeaderValue,
    KeywordsHeader,
    Mail,
    MessageIdHeader,
    MessageIdListHeader,
    MimeVersionHeader,
    ParameterizedValue,
    Received,
    ReceivedHeader,
    UnknownHeader,
    Unstructured,
)
from .astn import AstnBuilder, AstnValue
from .values import JsonValueBuilder, Value

T = TypeVar("T")


class ValueBuilder(Protocol[T]):
    """Primitive constructors of a target value tree."""

    def string(self, value: str) -> T:
        """Quoted text."""
        raise NotImplementedError

    def number(self, value: float) -> T:
        """Number; non-finite input must produce the tree's null value."""
        raise NotImplementedError

    def boolean(self, value: bool) -> T:
        raise NotImplementedError

    def nothing(self) -> T:
        """Explicit absence of an optional value."""
        raise NotImplementedError

    def state(self, tag: str, payload: T) -> T:
        """One variant of a tagged union."""
        raise NotImplementedError

    def group(self, fields: Mapping[str, T]) -> T:
        """Record with a fixed set of declared fields."""
        raise NotImplementedError

    def dictionary(self, entries: Mapping[str, T]) -> T:
        """Free-form string-keyed map."""
        raise NotImplementedError

    def sequence(self, items: Iterable[T]) -> T:
        raise NotImplementedError


class MailConverter(Generic[T]):
    """Walk the canonical model and build a value tree with ``builder``.

    Every declared field is emitted; absent optionals become the builder's
    ``nothing()`` rather than being left out.
    """

    def __init__(self, builder: ValueBuilder[T]) -> None:
        self._builder = builder

    def _optional_string(self, value: str | None) -> T:
        if value is None:
            return self._builder.nothing()
        return self._builder.string(value)

    def _timestamp(self, value: datetime | None) -> T:
        if value is None:
            return self._builder.nothing()
        return self._builder.string(serialize_datetime(value))

    def _strings(self, values: Iterable[str]) -> T:
        return self._builder.sequence(self._builder.string(value) for value in values)

    def address(self, address: Address) -> T:
        return self._builder.group(
            {
                "address": self._optional_string(address.address),
                "name": self._builder.string(address.name),
            }
        )

    def address_object(self, address_object: AddressObject) -> T:
        return self._builder.group(
            {
                "value": self._builder.sequence(
                    self.address(address) for address in address_object.value
                ),
                "html": self._builder.string(address_object.html),
                "text": self._builder.string(address_object.text),
            }
        )

    def address_objects(self, address_objects: Iterable[AddressObject]) -> T:
        return self._builder.sequence(
            self.address_object(address_object) for address_object in address_objects
        )

    def attachment(self, attachment: Attachment) -> T:
        return self._builder.group(
            {
                "filename": self._optional_string(attachment.filename),
                "contentType": self._builder.string(attachment.content_type),
                "contentDisposition": self._optional_string(
                    attachment.content_disposition
                ),
                "checksum": self._builder.string(attachment.checksum),
                "size": self._builder.number(attachment.size),
                "content": self._optional_string(attachment.content),
                "cid": self._optional_string(attachment.cid),
                "related": self._builder.boolean(attachment.related),
            }
        )

    def parameterized(self, value: ParameterizedValue) -> T:
        if value.params is None:
            params = self._builder.nothing()
        else:
            params = self._builder.dictionary(
                {
                    key: self._builder.string(param)
                    for key, param in value.params.items()
                }
            )
        return self._builder.group(
            {"value": self._builder.string(value.value), "params": params}
        )

    def received(self, received: Received) -> T:
        return self._builder.group(
            {
                "from": self._optional_string(received.from_),
                "by": self._optional_string(received.by),
                "via": self._optional_string(received.via),
                "with": self._optional_string(received.with_),
                "id": self._optional_string(received.id),
                "for": self._optional_string(received.for_),
                "date": self._timestamp(received.date),
            }
        )

    def header(self, header: HeaderValue) -> T:
        """Convert one header variant into a ``state(tag, payload)`` value."""
        # pylint: disable=too-many-return-statements
        build = self._builder
        match header:
            case (
                Unstructured(value=text)
                | MessageIdHeader(value=text)
                | MimeVersionHeader(value=text)
                | ContentEncodingHeader(value=text)
                | UnknownHeader(value=text)
            ):
                return build.state(header.tag, build.string(text))
            case DateHeader(value=timestamp):
                return build.state(header.tag, self._timestamp(timestamp))
            case AddressHeader(value=address_object):
                return build.state(header.tag, self.address_object(address_object))
            case AddressListHeader(value=address_objects):
                return build.state(header.tag, self.address_objects(address_objects))
            case MessageIdListHeader(value=texts) | KeywordsHeader(value=texts):
                return build.state(header.tag, self._strings(texts))
            case ContentTypeHeader(value=value) | ContentDispositionHeader(value=value):
                return build.state(header.tag, self.parameterized(value))
            case ReceivedHeader(value=received):
                return build.state(header.tag, self.received(received))
            case _:
                assert_never(header)

    def headers(self, headers: Mapping[str, HeaderValue]) -> T:
        return self._builder.dictionary(
            {key: self.header(value) for key, value in headers.items()}
        )

    def mail(self, mail: Mail) -> T:
        """Convert a whole :class:`Mail`; the entry point of the visitor."""
        build = self._builder
        return build.group(
            {
                "headers": self.headers(mail.headers),
                "subject": self._optional_string(mail.subject),
                "from": (
                    build.nothing()
                    if mail.from_ is None
                    else self.address_object(mail.from_)
                ),
                "to": self.address_objects(mail.to),
                "cc": self.address_objects(mail.cc),
                "bcc": self.address_objects(mail.bcc),
                "replyTo": self.address_objects(mail.reply_to),
                "date": self._timestamp(mail.date),
                "messageId": self._optional_string(mail.message_id),
                "inReplyTo": self._optional_string(mail.in_reply_to),
                "references": self._strings(mail.references),
                "text": self._optional_string(mail.text),
                # no HTML body (False) renders the same as an unknown one
                "html": self._optional_string(
                    None if mail.html is False else mail.html
                ),
                "textAsHtml": self._optional_string(mail.text_as_html),
                "attachments": build.sequence(
                    self.attachment(attachment) for attachment in mail.attachments
                ),
            }
        )


def convert(mail: Mail) -> Value:
    """Convert ``mail`` into the JSON-like value tree."""
    return MailConverter(JsonValueBuilder()).mail(mail)


def to_astn(mail: Mail) -> AstnValue:
    """Convert ``mail`` into the block-structured value tree."""
    return MailConverter(AstnBuilder()).mail(mail)


__all__ = ["MailConverter", "ValueBuilder", "convert", "to_astn"]
