"""Base class for account state variants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

from account_state.models.enums import AccountStatus

if TYPE_CHECKING:
    from account_state.models.account import Account


class AccountState(ABC):
    """Behaviour of an account in one status.

    Variants carry no per-account data. Every operation emits its messages
    through the account and returns the state the account must be in
    afterwards; returning ``self`` means no transition.
    """

    status: AccountStatus

    @abstractmethod
    def deposit(self, account: Account, amount: Decimal) -> AccountState: ...

    @abstractmethod
    def withdraw(self, account: Account, amount: Decimal) -> AccountState: ...

    @abstractmethod
    def activate(self, account: Account) -> AccountState: ...

    @abstractmethod
    def suspend(self, account: Account) -> AccountState: ...

    @abstractmethod
    def close(self, account: Account) -> AccountState: ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"
