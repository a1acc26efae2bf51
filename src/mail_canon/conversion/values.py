"""Generic JSON-like value tree rendered by the JSON grammar."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Null:
    pass


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool


@dataclass(frozen=True, slots=True)
class Number:
    """Always finite once built through :class:`JsonValueBuilder`."""

    value: float


@dataclass(frozen=True, slots=True)
class String:
    value: str


@dataclass(frozen=True, slots=True)
class Array:
    items: tuple[Value, ...] = ()


@dataclass(frozen=True, slots=True)
class Object:
    entries: Mapping[str, Value]


Value: TypeAlias = Null | Boolean | Number | String | Array | Object

NULL = Null()


class JsonValueBuilder:
    """Builds :data:`Value` trees for the JSON grammar.

    Union variants become ``[tag, payload]`` arrays; records and maps both
    become objects.
    """

    def string(self, value: str) -> Value:
        return String(value)

    def number(self, value: float) -> Value:
        if not math.isfinite(value):
            return NULL
        return Number(value)

    def boolean(self, value: bool) -> Value:
        return Boolean(value)

    def nothing(self) -> Value:
        return NULL

    def state(self, tag: str, payload: Value) -> Value:
        return Array((String(tag), payload))

    def group(self, fields: Mapping[str, Value]) -> Value:
        return Object(MappingProxyType(dict(fields)))

    def dictionary(self, entries: Mapping[str, Value]) -> Value:
        return Object(MappingProxyType(dict(entries)))

    def sequence(self, items: Iterable[Value]) -> Value:
        return Array(tuple(items))


__all__ = [
    "NULL",
    "Array",
    "Boolean",
    "JsonValueBuilder",
    "Null",
    "Number",
    "Object",
    "String",
    "Value",
]
