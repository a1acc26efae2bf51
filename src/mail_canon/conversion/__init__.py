"""Conversion of canonical mail into value trees."""

from .astn import AstnBuilder, AstnValue
from .converter import MailConverter, ValueBuilder, convert, to_astn
from .values import JsonValueBuilder, Value

__all__ = [
    "AstnBuilder",
    "AstnValue",
    "JsonValueBuilder",
    "MailConverter",
    "Value",
    "ValueBuilder",
    "convert",
    "to_astn",
]
