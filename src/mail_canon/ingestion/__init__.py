"""Ingestion of raw RFC822 payloads."""

from .parser import EmailParser, EmptyInputError
from .records import ParsedMail, RawAddress, RawAddressObject, RawAttachment

__all__ = [
    "EmailParser",
    "EmptyInputError",
    "ParsedMail",
    "RawAddress",
    "RawAddressObject",
    "RawAttachment",
]
