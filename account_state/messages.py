"""Literal message lines emitted by the account states.

One constant per (state, operation) outcome. The wording is kept exactly as
callers see it, including the "can not" in ``CLOSED_ACTIVATE``.
"""

ACTIVE_DEPOSIT = "Deposit successful!"
ACTIVE_WITHDRAW = "Withdrawal successful!"
ACTIVE_ACTIVATE = "Account is already active!"
ACTIVE_SUSPEND = "Account has been suspended!"
ACTIVE_CLOSE = "Account has been closed!"

SUSPENDED_DEPOSIT = "You cannot deposit on a suspended account!"
SUSPENDED_WITHDRAW = "You cannot withdraw on a suspended account!"
SUSPENDED_ACTIVATE = "Account has been activated!"
SUSPENDED_SUSPEND = "Account is already suspended!"
SUSPENDED_CLOSE = "Account has been closed!"

CLOSED_DEPOSIT = "You cannot deposit on a closed account!"
CLOSED_WITHDRAW = "You cannot withdraw on a closed account!"
CLOSED_ACTIVATE = "You can not activate closed account!"
CLOSED_SUSPEND = "You cannot suspend closed account!"
CLOSED_CLOSE = "Account is already closed!"
