"""Account and operation generators."""

import random
from decimal import Decimal
from typing import Iterator

from account_state.generators.base import BaseGenerator
from account_state.models.account import Account
from account_state.models.enums import Operation
from account_state.scenarios.steps import Step
from account_state.sinks.base import MessageSink


class AccountGenerator(BaseGenerator):
    """Generate accounts with random numbers and opening balances."""

    def __init__(
        self,
        seed: int | None = None,
        max_balance: float = 20000.0,
        locale: str = "en_US",
    ) -> None:
        super().__init__(seed, locale=locale)
        self.max_balance = max_balance

    def generate(self, sink: MessageSink | None = None) -> Account:
        """Generate a single active account.

        Parameters
        ----------
        sink : MessageSink | None
            Message sink handed to the account.

        Returns
        -------
        Account
            Generated account.
        """
        account_number = self.fake.numerify("######-#")
        balance = Decimal(str(round(random.uniform(0, self.max_balance), 2)))
        return Account(account_number, balance, sink=sink)

    def generate_batch(self, count: int, sink: MessageSink | None = None) -> Iterator[Account]:
        for _ in range(count):
            yield self.generate(sink=sink)


class OperationGenerator(BaseGenerator):
    """Generate random operation steps.

    Money movements dominate; ``close`` is the rarest so that walks
    usually visit the other states before ending up closed.
    """

    OPERATIONS = list(Operation)
    OPERATION_WEIGHTS = [0.30, 0.30, 0.15, 0.15, 0.10]

    def __init__(self, seed: int | None = None, max_amount: float = 1000.0) -> None:
        super().__init__(seed)
        self.max_amount = max_amount

    def generate(self) -> Step:
        """Generate a single step."""
        operation = random.choices(self.OPERATIONS, weights=self.OPERATION_WEIGHTS, k=1)[0]
        if operation.takes_amount:
            amount = Decimal(str(round(random.uniform(1, self.max_amount), 2)))
            return Step(operation, amount)
        return Step(operation)

    def generate_batch(self, count: int) -> Iterator[Step]:
        for _ in range(count):
            yield self.generate()
