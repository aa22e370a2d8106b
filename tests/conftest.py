"""Shared fixtures."""

import pytest
from app.core.room_relay import room_relay


@pytest.fixture(autouse=True)
def empty_relay():
    """Each test starts and ends with no rooms or connections."""
    room_relay.clear()
    yield room_relay
    room_relay.clear()
