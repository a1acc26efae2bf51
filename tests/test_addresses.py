"""Tests for address normalization."""

from __future__ import annotations

from mail_canon.core.models import Address, AddressObject
from mail_canon.normalization import (
    normalize_address,
    normalize_address_object,
    normalize_addresses,
    normalize_from,
)


def test_missing_name_defaults_to_empty_string() -> None:
    assert normalize_address({"address": "a@example.com"}) == Address(
        address="a@example.com", name=""
    )


def test_falsy_address_is_left_absent() -> None:
    assert normalize_address({"address": "", "name": "Undisclosed"}).address is None
    assert normalize_address({"name": "Nobody"}).address is None


def test_address_object_fields(address_object: dict[str, object]) -> None:
    normalized = normalize_address_object(address_object)

    assert normalized == AddressObject(
        value=(Address(address="user@example.com", name="User"),),
        html='<span class="mp_address_name">User</span>',
        text="User <user@example.com>",
    )


def test_single_object_and_one_element_list_normalize_identically(
    address_object: dict[str, object],
) -> None:
    assert normalize_addresses(address_object) == normalize_addresses(
        [address_object]
    )
    assert len(normalize_addresses(address_object)) == 1


def test_absent_multi_valued_field_is_empty_tuple() -> None:
    assert normalize_addresses(None) == ()
    assert normalize_addresses([]) == ()


def test_from_keeps_only_first_sender(address_object: dict[str, object]) -> None:
    other = {
        "value": [{"address": "other@example.com", "name": "Other"}],
        "html": "",
        "text": "Other <other@example.com>",
    }

    sender = normalize_from([address_object, other])

    assert sender is not None
    assert sender.value[0].address == "user@example.com"


def test_from_single_object_and_absent() -> None:
    assert normalize_from(None) is None
    assert normalize_from([]) is None
    sender = normalize_from({"value": [{"address": "s@example.com"}], "text": "s"})
    assert sender == AddressObject(
        value=(Address(address="s@example.com", name=""),), html="", text="s"
    )
