"""Normalization of address header payloads."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..core.models import Address, AddressObject


def normalize_address(raw: Mapping[str, Any] | str) -> Address:
    """Normalize one mailbox; a missing name becomes ``""``, a falsy address ``None``.

    A bare string is taken as the address itself.
    """
    if not isinstance(raw, Mapping):
        return Address(address=str(raw) if raw else None)
    address = raw.get("address")
    return Address(
        address=str(address) if address else None,
        name=str(raw.get("name") or ""),
    )


def normalize_address_object(raw: Mapping[str, Any]) -> AddressObject:
    """Normalize an address header payload into an :class:`AddressObject`."""
    entries = raw.get("value") or ()
    if isinstance(entries, str | Mapping):
        entries = (entries,)
    elif not isinstance(entries, Iterable):
        entries = ()
    return AddressObject(
        value=tuple(normalize_address(entry) for entry in entries),
        html=str(raw.get("html") or ""),
        text=str(raw.get("text") or ""),
    )


def _as_sequence(raw: Any) -> Sequence[Mapping[str, Any]]:
    if not raw:
        return ()
    if isinstance(raw, Mapping):
        return (raw,)
    return tuple(raw)


def normalize_addresses(raw: Any) -> tuple[AddressObject, ...]:
    """Normalize a multi-valued address field.

    Absent input yields an empty tuple and a single address object is
    wrapped, so ``to``, ``cc``, ``bcc`` and ``reply_to`` are always sequences.
    """
    return tuple(normalize_address_object(entry) for entry in _as_sequence(raw))


def normalize_from(raw: Any) -> AddressObject | None:
    """Normalize the sender field to at most one address object.

    RFC 5322 allows a single ``From`` header, so when the parser hands over
    several only the first is kept.
    """
    entries = _as_sequence(raw)
    if not entries:
        return None
    return normalize_address_object(entries[0])


__all__ = [
    "normalize_address",
    "normalize_address_object",
    "normalize_addresses",
    "normalize_from",
]
