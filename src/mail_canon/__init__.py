"""Deterministic structured-text rendering of parsed e-mail messages."""

from .conversion import convert, to_astn
from .normalization import assemble, classify
from .pipeline import render_mail
from .serialization import serialize, serialize_astn

__all__ = [
    "assemble",
    "classify",
    "convert",
    "render_mail",
    "serialize",
    "serialize_astn",
    "to_astn",
]
