"""Tests for custom exception hierarchy."""

from account_state.exceptions import (
    AccountStateError,
    ConfigurationError,
    InvalidAmountError,
    UnknownOperationError,
    UnknownStatusError,
)
from account_state.scenarios.random_walk import InvariantViolation


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_account_state_error_is_exception(self) -> None:
        assert isinstance(AccountStateError("test"), Exception)

    def test_invalid_amount_is_account_state_error(self) -> None:
        assert isinstance(InvalidAmountError("test"), AccountStateError)

    def test_unknown_status_is_account_state_error(self) -> None:
        assert isinstance(UnknownStatusError("test"), AccountStateError)

    def test_unknown_operation_is_account_state_error(self) -> None:
        assert isinstance(UnknownOperationError("test"), AccountStateError)

    def test_configuration_error_is_account_state_error(self) -> None:
        assert isinstance(ConfigurationError("test"), AccountStateError)

    def test_invariant_violation_is_account_state_error(self) -> None:
        assert isinstance(InvariantViolation("test"), AccountStateError)

    def test_exception_message(self) -> None:
        err = UnknownStatusError("No account state for status 'FROZEN'")
        assert str(err) == "No account state for status 'FROZEN'"
