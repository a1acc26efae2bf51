"""Block-structured (ASTN) rendering of :data:`AstnValue` trees.

Tokens::

    ~                 nothing
    "text"            quoted text
    42, true          unquoted text
    | 'tag' value     state (union variant)
    ( 'key': value )  verbose group (record)
    { "key": value }  dictionary
    [ value ]         list

Containers put one entry per line and sort keys by code point.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import assert_never

from ..conversion.astn import (
    AstnValue,
    Dictionary,
    Group,
    ListValue,
    Nothing,
    State,
    Text,
)
from ..core.text_utils import quote


@dataclass(frozen=True, slots=True)
class AstnGrammar:
    """Serializer for the block-structured grammar."""

    indentation: str = "  "
    newline: str = "\n"

    def serialize(self, value: AstnValue) -> str:
        return self._render(value, 0)

    def _block(self, opening: str, closing: str, lines: list[str], level: int) -> str:
        if not lines:
            return opening + closing
        return (
            opening
            + self.newline
            + self.newline.join(lines)
            + self.newline
            + self.indentation * level
            + closing
        )

    def _entries(
        self, entries: Mapping[str, AstnValue], delimiter: str, level: int
    ) -> list[str]:
        inner = self.indentation * (level + 1)
        return [
            f"{inner}{quote(key, delimiter)}: {self._render(entries[key], level + 1)}"
            for key in sorted(entries)
        ]

    def _render(self, value: AstnValue, level: int) -> str:
        match value:
            case Nothing():
                return "~"
            case Text(value=text, quoted=quoted):
                return quote(text) if quoted else text
            case State(state=tag, value=payload):
                tag_token = quote(tag, "'")
                return f"| {tag_token} {self._render(payload, level)}"
            case Group(fields=fields):
                return self._block("(", ")", self._entries(fields, "'", level), level)
            case Dictionary(entries=entries):
                return self._block("{", "}", self._entries(entries, '"', level), level)
            case ListValue(items=items):
                inner = self.indentation * (level + 1)
                lines = [f"{inner}{self._render(item, level + 1)}" for item in items]
                return self._block("[", "]", lines, level)
            case _:
                assert_never(value)


def serialize_astn(value: AstnValue, indent: str = "  ", newline: str = "\n") -> str:
    """Serialize ``value`` with the block-structured grammar."""
    return AstnGrammar(indentation=indent, newline=newline).serialize(value)


__all__ = ["AstnGrammar", "serialize_astn"]
