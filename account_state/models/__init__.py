"""Domain models for the account state machine."""

from account_state.models.account import Account, to_decimal
from account_state.models.enums import AccountStatus, Operation

__all__ = ["Account", "AccountStatus", "Operation", "to_decimal"]
