"""Enumeration types for account entities."""

from enum import Enum


class AccountStatus(str, Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    CLOSED = "CLOSED"


class Operation(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    ACTIVATE = "activate"
    SUSPEND = "suspend"
    CLOSE = "close"

    @property
    def takes_amount(self) -> bool:
        return self in (Operation.DEPOSIT, Operation.WITHDRAW)
