"""Bank account modelled with the State pattern."""

from account_state.models import Account, AccountStatus, Operation
from account_state.states import ACTIVE, CLOSED, SUSPENDED, AccountState, state_for

__version__ = "0.1.0"

__all__ = [
    "ACTIVE",
    "CLOSED",
    "SUSPENDED",
    "Account",
    "AccountState",
    "AccountStatus",
    "Operation",
    "state_for",
]
