"""Pytest configuration and fixtures."""

import logging
from typing import Iterator

import pytest

from account_state.models import Account
from account_state.sinks import MemorySink


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sink() -> MemorySink:
    """In-memory message sink."""
    return MemorySink()


@pytest.fixture
def account(sink: MemorySink) -> Account:
    """Active account writing to the memory sink."""
    return Account("1234", 10000.0, sink=sink)


@pytest.fixture
def suspended_account(account: Account, sink: MemorySink) -> Account:
    """Account moved to the suspended state."""
    account.suspend()
    sink.drain()
    return account


@pytest.fixture
def closed_account(account: Account, sink: MemorySink) -> Account:
    """Account moved to the closed state."""
    account.close()
    sink.drain()
    return account


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Remove handlers installed by setup_logging and reset levels."""
    root = logging.getLogger()
    level = root.level
    package_level = logging.getLogger("account_state").level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("account_state").setLevel(package_level)
