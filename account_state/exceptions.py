"""Custom exception hierarchy for account-state.

Refused operations are not errors and never raise; these exceptions cover
bad input and misconfiguration only.
"""


class AccountStateError(Exception):
    """Base exception for all account-state errors."""


class InvalidAmountError(AccountStateError):
    """Raised when an amount cannot be interpreted as a number."""


class UnknownStatusError(AccountStateError):
    """Raised when a status tag has no matching state variant."""


class UnknownOperationError(AccountStateError):
    """Raised when a step names an operation the account does not support."""


class ConfigurationError(AccountStateError):
    """Raised when configuration is invalid or missing."""
