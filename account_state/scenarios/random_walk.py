"""Random walk scenario over the account state machine."""

import logging

from account_state.exceptions import AccountStateError
from account_state.generators import AccountGenerator, OperationGenerator
from account_state.models.account import Account
from account_state.models.enums import AccountStatus
from account_state.scenarios.steps import StepResult, run_steps
from account_state.sinks.base import MessageSink
from account_state.sinks.memory import MemorySink

logger = logging.getLogger(__name__)


class InvariantViolation(AccountStateError):
    """Raised when a walk observes a forbidden transition or balance change."""


class RandomWalkScenario:
    """Drive a generated account through a random sequence of operations.

    After the walk every step is checked against the transition table:
    nothing leaves Closed, and the balance only moves on an active
    deposit or withdrawal.
    """

    def __init__(
        self,
        steps: int = 20,
        max_amount: float = 1000.0,
        seed: int | None = None,
        sink: MessageSink | None = None,
    ) -> None:
        """Initialize random walk scenario.

        Parameters
        ----------
        steps : int
            Number of operations to apply.
        max_amount : float
            Upper bound for generated deposit/withdraw amounts.
        seed : int | None
            Random seed for reproducibility.
        sink : MessageSink | None
            Where account messages go (default: discarded into memory).
        """
        self.steps = steps
        self.max_amount = max_amount
        self.seed = seed
        self.sink = sink if sink is not None else MemorySink()

        self._account_gen = AccountGenerator(seed=seed)
        self._operation_gen = OperationGenerator(seed=seed, max_amount=max_amount)
        self.account: Account | None = None

    def run(self) -> list[StepResult]:
        """Generate the account and steps, run them and verify the results."""
        self.account = self._account_gen.generate(sink=self.sink)
        steps = list(self._operation_gen.generate_batch(self.steps))

        logger.info(
            "Starting random walk: account %s, %d steps",
            self.account.account_number,
            len(steps),
        )
        results = run_steps(self.account, steps)
        self.verify(results)
        logger.info(
            "Random walk finished: status %s, balance %s",
            self.account.status.value,
            self.account.balance,
        )
        return results

    @staticmethod
    def verify(results: list[StepResult]) -> None:
        """Check every result against the transition rules."""
        for index, result in enumerate(results):
            if result.status_before is AccountStatus.CLOSED and result.transitioned:
                raise InvariantViolation(f"Step {index} ({result.step}) left the closed state")
            moves_money = (
                result.status_before is AccountStatus.ACTIVE
                and result.step.operation.takes_amount
            )
            if not moves_money and result.balance_after != result.balance_before:
                raise InvariantViolation(f"Step {index} ({result.step}) changed the balance")
