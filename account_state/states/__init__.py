"""Account state variants.

Each variant is stateless, so one shared instance per status is enough.
"""

from account_state.exceptions import UnknownStatusError
from account_state.models.enums import AccountStatus
from account_state.states.active import ActiveState
from account_state.states.base import AccountState
from account_state.states.closed import ClosedState
from account_state.states.suspended import SuspendedState

ACTIVE = ActiveState()
SUSPENDED = SuspendedState()
CLOSED = ClosedState()

_BY_STATUS: dict[AccountStatus, AccountState] = {
    AccountStatus.ACTIVE: ACTIVE,
    AccountStatus.SUSPENDED: SUSPENDED,
    AccountStatus.CLOSED: CLOSED,
}


def state_for(status: AccountStatus | str) -> AccountState:
    """Return the state variant for a status tag."""
    try:
        return _BY_STATUS[AccountStatus(status)]
    except ValueError as exc:
        raise UnknownStatusError(f"No account state for status {status!r}") from exc


__all__ = [
    "ACTIVE",
    "CLOSED",
    "SUSPENDED",
    "AccountState",
    "ActiveState",
    "ClosedState",
    "SuspendedState",
    "state_for",
]
