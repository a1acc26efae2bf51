"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_payload() -> bytes:
    return (FIXTURES / "sample_email.eml").read_bytes()


@pytest.fixture
def related_payload() -> bytes:
    return (FIXTURES / "related_email.eml").read_bytes()


@pytest.fixture
def address_object() -> dict[str, object]:
    return {
        "value": [{"address": "user@example.com", "name": "User"}],
        "html": '<span class="mp_address_name">User</span>',
        "text": "User <user@example.com>",
    }
