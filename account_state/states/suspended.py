"""Suspended account state."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from account_state import messages
from account_state.logging import get_logger
from account_state.models.enums import AccountStatus
from account_state.states.base import AccountState

if TYPE_CHECKING:
    from account_state.models.account import Account

logger = get_logger(__name__)


class SuspendedState(AccountState):
    """Money movements are refused until the account is reactivated."""

    status = AccountStatus.SUSPENDED

    def deposit(self, account: Account, amount: Decimal) -> AccountState:
        logger.debug("Refused deposit of %s on suspended account %s", amount, account.account_number)
        account.emit(messages.SUSPENDED_DEPOSIT)
        return self

    def withdraw(self, account: Account, amount: Decimal) -> AccountState:
        logger.debug("Refused withdrawal of %s on suspended account %s", amount, account.account_number)
        account.emit(messages.SUSPENDED_WITHDRAW)
        return self

    def activate(self, account: Account) -> AccountState:
        from account_state.states import ACTIVE

        account.emit(messages.SUSPENDED_ACTIVATE)
        return ACTIVE

    def suspend(self, account: Account) -> AccountState:
        account.emit(messages.SUSPENDED_SUSPEND)
        return self

    def close(self, account: Account) -> AccountState:
        from account_state.states import CLOSED

        account.emit(messages.SUSPENDED_CLOSE)
        return CLOSED
