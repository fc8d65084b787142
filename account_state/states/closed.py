"""Closed account state.

Terminal: every operation is refused and no transition leaves it. Refused
money movements also echo the account so the caller sees what was kept.
"""

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


class ClosedState(AccountState):
    status = AccountStatus.CLOSED

    def deposit(self, account: Account, amount: Decimal) -> AccountState:
        logger.debug("Refused deposit of %s on closed account %s", amount, account.account_number)
        account.emit(messages.CLOSED_DEPOSIT)
        account.emit(str(account))
        return self

    def withdraw(self, account: Account, amount: Decimal) -> AccountState:
        logger.debug("Refused withdrawal of %s on closed account %s", amount, account.account_number)
        account.emit(messages.CLOSED_WITHDRAW)
        account.emit(str(account))
        return self

    def activate(self, account: Account) -> AccountState:
        account.emit(messages.CLOSED_ACTIVATE)
        return self

    def suspend(self, account: Account) -> AccountState:
        account.emit(messages.CLOSED_SUSPEND)
        return self

    def close(self, account: Account) -> AccountState:
        account.emit(messages.CLOSED_CLOSE)
        return self
