"""Normalization of parsed mail records into the canonical model."""

from .addresses import (
    normalize_address,
    normalize_address_object,
    normalize_addresses,
    normalize_from,
)
from .assembler import assemble
from .attachments import normalize_attachment, normalize_attachments
from .headers import classify, stringify

__all__ = [
    "assemble",
    "classify",
    "normalize_address",
    "normalize_address_object",
    "normalize_addresses",
    "normalize_attachment",
    "normalize_attachments",
    "normalize_from",
    "stringify",
]
