"""Account context for the state machine."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from account_state.exceptions import InvalidAmountError
from account_state.logging import get_logger
from account_state.models.enums import AccountStatus
from account_state.sinks.base import MessageSink
from account_state.sinks.console import ConsoleSink

if TYPE_CHECKING:
    from account_state.states.base import AccountState

logger = get_logger(__name__)


def to_decimal(amount: object) -> Decimal:
    """Convert a numeric amount to ``Decimal`` through its string form.

    Going through ``str`` keeps the float's shortest repr, so ``10000.0``
    becomes ``Decimal("10000.0")`` rather than a long binary expansion.
    """
    if isinstance(amount, Decimal):
        result = amount
    elif isinstance(amount, bool) or not isinstance(amount, (int, float, str)):
        raise InvalidAmountError(f"Amount must be numeric, got {amount!r}")
    else:
        try:
            result = Decimal(str(amount))
        except InvalidOperation as exc:
            raise InvalidAmountError(f"Amount must be numeric, got {amount!r}") from exc
    # NaN and infinity are not amounts.
    if not result.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {amount!r}")
    return result


class Account:
    """Bank account whose behaviour is delegated to its current state.

    The account holds no business rules. Each operation hands ``self`` to
    the current state variant, which adjusts the balance if allowed, emits
    its messages and returns the state the account is in afterwards.

    Parameters
    ----------
    account_number : str
        Immutable account identifier.
    balance : Decimal | float | int | str
        Opening balance.
    sink : MessageSink | None
        Destination for message lines (default: a ``ConsoleSink``).
    """

    def __init__(
        self,
        account_number: str,
        balance: Decimal | float | int | str = 0,
        sink: MessageSink | None = None,
    ) -> None:
        from account_state.states import ACTIVE

        self._account_number = account_number
        self._balance = to_decimal(balance)
        self._state: AccountState = ACTIVE
        self.sink: MessageSink = sink if sink is not None else ConsoleSink()
        logger.debug("Opened account %s with balance %s", account_number, self._balance)

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def state(self) -> AccountState:
        return self._state

    @property
    def status(self) -> AccountStatus:
        return self._state.status

    def deposit(self, amount: Decimal | float | int | str) -> None:
        self._set_state(self._state.deposit(self, to_decimal(amount)))

    def withdraw(self, amount: Decimal | float | int | str) -> None:
        self._set_state(self._state.withdraw(self, to_decimal(amount)))

    def activate(self) -> None:
        self._set_state(self._state.activate(self))

    def suspend(self) -> None:
        self._set_state(self._state.suspend(self))

    def close(self) -> None:
        self._set_state(self._state.close(self))

    def emit(self, message: str) -> None:
        """Send one message line to the account's sink."""
        self.sink.write(message)

    def _adjust_balance(self, delta: Decimal) -> None:
        # Only the active state calls this.
        self._balance += delta

    def _set_state(self, new_state: AccountState) -> None:
        if new_state is self._state:
            return
        logger.info(
            "Account %s: %s -> %s",
            self._account_number,
            self._state.status.value,
            new_state.status.value,
        )
        self._state = new_state

    def __str__(self) -> str:
        return f"Account{{accountNumber='{self._account_number}', balance={self._balance}}}"

    def __repr__(self) -> str:
        return (
            f"Account(account_number={self._account_number!r}, "
            f"balance={self._balance!r}, status={self.status.value})"
        )
