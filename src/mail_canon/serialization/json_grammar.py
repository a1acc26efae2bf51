"""Canonical JSON-like rendering of :data:`Value` trees."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import assert_never

from ..conversion.values import Array, Boolean, Null, Number, Object, String, Value
from ..core.text_utils import format_number, quote


@dataclass(frozen=True, slots=True)
class JsonGrammar:
    """Render values one element per line with object keys in code point order.

    Output depends only on the tree's content, never on the insertion order
    of its objects, so equal trees always produce identical text.
    """

    indentation: str = "  "
    newline: str = "\n"

    def serialize(self, value: Value) -> str:
        return self._render(value, 0)

    def _block(self, opening: str, closing: str, lines: list[str], level: int) -> str:
        separator = "," + self.newline
        return (
            opening
            + self.newline
            + separator.join(lines)
            + self.newline
            + self.indentation * level
            + closing
        )

    def _render(self, value: Value, level: int) -> str:
        # pylint: disable=too-many-return-statements
        inner = self.indentation * (level + 1)
        match value:
            case Null():
                return "null"
            case Boolean(value=flag):
                return "true" if flag else "false"
            case Number(value=number):
                return format_number(number) if math.isfinite(number) else "null"
            case String(value=text):
                return quote(text)
            case Array(items=items):
                if not items:
                    return "[]"
                lines = [f"{inner}{self._render(item, level + 1)}" for item in items]
                return self._block("[", "]", lines, level)
            case Object(entries=entries):
                if not entries:
                    return "{}"
                lines = [
                    f"{inner}{quote(key)}: {self._render(entries[key], level + 1)}"
                    for key in sorted(entries)
                ]
                return self._block("{", "}", lines, level)
            case _:
                assert_never(value)


def serialize(value: Value, indent: str = "  ", newline: str = "\n") -> str:
    """Serialize ``value`` with the JSON grammar."""
    return JsonGrammar(indentation=indent, newline=newline).serialize(value)


__all__ = ["JsonGrammar", "serialize"]
