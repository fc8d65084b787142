"""Active account state."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from account_state import messages
from account_state.models.enums import AccountStatus
from account_state.states.base import AccountState

if TYPE_CHECKING:
    from account_state.models.account import Account


class ActiveState(AccountState):
    """Normal operation: money moves, the account may be suspended or closed."""

    status = AccountStatus.ACTIVE

    def deposit(self, account: Account, amount: Decimal) -> AccountState:
        account._adjust_balance(amount)
        account.emit(messages.ACTIVE_DEPOSIT)
        account.emit(str(account))
        return self

    def withdraw(self, account: Account, amount: Decimal) -> AccountState:
        # No insufficient-funds check; the balance may go negative.
        account._adjust_balance(-amount)
        account.emit(messages.ACTIVE_WITHDRAW)
        account.emit(str(account))
        return self

    def activate(self, account: Account) -> AccountState:
        account.emit(messages.ACTIVE_ACTIVATE)
        return self

    def suspend(self, account: Account) -> AccountState:
        from account_state.states import SUSPENDED

        account.emit(messages.ACTIVE_SUSPEND)
        return SUSPENDED

    def close(self, account: Account) -> AccountState:
        from account_state.states import CLOSED

        account.emit(messages.ACTIVE_CLOSE)
        return CLOSED
