"""Operation steps and a runner that records their outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable

from account_state.exceptions import InvalidAmountError, UnknownOperationError
from account_state.models.account import Account, to_decimal
from account_state.models.enums import AccountStatus, Operation
from account_state.sinks.memory import MemorySink, TeeSink


@dataclass(frozen=True)
class Step:
    """One operation to apply to an account."""

    operation: Operation
    amount: Decimal | None = None

    def __post_init__(self) -> None:
        if self.operation.takes_amount and self.amount is None:
            raise InvalidAmountError(f"{self.operation.value} needs an amount")
        if not self.operation.takes_amount and self.amount is not None:
            raise InvalidAmountError(f"{self.operation.value} takes no amount")

    @classmethod
    def parse(cls, text: str) -> Step:
        """Parse ``"deposit:1000.0"`` or ``"close"`` into a step."""
        name, _, raw_amount = text.strip().partition(":")
        try:
            operation = Operation(name.strip().lower())
        except ValueError as exc:
            raise UnknownOperationError(f"Unknown operation: {name!r}") from exc
        amount = to_decimal(raw_amount.strip()) if raw_amount else None
        return cls(operation, amount)

    def __str__(self) -> str:
        if self.amount is None:
            return self.operation.value
        return f"{self.operation.value}:{self.amount}"


@dataclass
class StepResult:
    """Observed effect of one step."""

    step: Step
    status_before: AccountStatus
    status_after: AccountStatus
    balance_before: Decimal
    balance_after: Decimal
    messages: list[str] = field(default_factory=list)

    @property
    def transitioned(self) -> bool:
        return self.status_before is not self.status_after


def apply_step(account: Account, step: Step) -> None:
    """Invoke the account operation a step names."""
    if step.operation.takes_amount:
        getattr(account, step.operation.value)(step.amount)
    else:
        getattr(account, step.operation.value)()


def run_steps(account: Account, steps: Iterable[Step]) -> list[StepResult]:
    """Apply steps in order and record what each one did.

    Messages still reach the account's own sink; a memory sink is teed in
    for the duration of the run so each result carries its lines.
    """
    capture = MemorySink()
    original_sink = account.sink
    account.sink = TeeSink(original_sink, capture)
    results: list[StepResult] = []
    try:
        for step in steps:
            status_before = account.status
            balance_before = account.balance
            apply_step(account, step)
            results.append(
                StepResult(
                    step=step,
                    status_before=status_before,
                    status_after=account.status,
                    balance_before=balance_before,
                    balance_after=account.balance,
                    messages=capture.drain(),
                )
            )
    finally:
        account.sink = original_sink
    return results


DEMO_ACCOUNT_NUMBER = "1234"
DEMO_OPENING_BALANCE = 10000.0

DEMO_STEPS: tuple[Step, ...] = (
    Step(Operation.ACTIVATE),
    Step(Operation.SUSPEND),
    Step(Operation.ACTIVATE),
    Step(Operation.DEPOSIT, Decimal("1000.0")),
    Step(Operation.WITHDRAW, Decimal("100.0")),
    Step(Operation.CLOSE),
    Step(Operation.ACTIVATE),
    Step(Operation.SUSPEND),
    Step(Operation.WITHDRAW, Decimal("500.0")),
    Step(Operation.DEPOSIT, Decimal("1000.0")),
)
