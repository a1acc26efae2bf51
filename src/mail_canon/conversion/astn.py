"""Value tree for the block-structured (ASTN) grammar.

Compared to the JSON tree it keeps more structure: text remembers whether it
is quoted, union variants are explicit states, and records (verbose groups)
are distinct from free-form dictionaries.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias

from ..core.text_utils import format_number


@dataclass(frozen=True, slots=True)
class Nothing:
    pass


@dataclass(frozen=True, slots=True)
class Text:
    value: str
    quoted: bool = True


@dataclass(frozen=True, slots=True)
class State:
    state: str
    value: AstnValue


@dataclass(frozen=True, slots=True)
class Group:
    fields: Mapping[str, AstnValue]


@dataclass(frozen=True, slots=True)
class Dictionary:
    entries: Mapping[str, AstnValue]


@dataclass(frozen=True, slots=True)
class ListValue:
    items: tuple[AstnValue, ...] = ()


AstnValue: TypeAlias = Nothing | Text | State | Group | Dictionary | ListValue

NOTHING = Nothing()


class AstnBuilder:
    """Builds :data:`AstnValue` trees."""

    def string(self, value: str) -> AstnValue:
        return Text(value)

    def number(self, value: float) -> AstnValue:
        if not math.isfinite(value):
            return NOTHING
        return Text(format_number(value), quoted=False)

    def boolean(self, value: bool) -> AstnValue:
        return Text("true" if value else "false", quoted=False)

    def nothing(self) -> AstnValue:
        return NOTHING

    def state(self, tag: str, payload: AstnValue) -> AstnValue:
        return State(tag, payload)

    def group(self, fields: Mapping[str, AstnValue]) -> AstnValue:
        return Group(MappingProxyType(dict(fields)))

    def dictionary(self, entries: Mapping[str, AstnValue]) -> AstnValue:
        return Dictionary(MappingProxyType(dict(entries)))

    def sequence(self, items: Iterable[AstnValue]) -> AstnValue:
        return ListValue(tuple(items))


__all__ = [
    "NOTHING",
    "AstnBuilder",
    "AstnValue",
    "Dictionary",
    "Group",
    "ListValue",
    "Nothing",
    "State",
    "Text",
]
