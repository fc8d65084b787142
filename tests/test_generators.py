"""Tests for data generators."""

import re
from decimal import Decimal

from account_state.generators import AccountGenerator, OperationGenerator
from account_state.models import AccountStatus, Operation
from account_state.sinks import MemorySink


class TestAccountGenerator:
    """Tests for AccountGenerator."""

    def test_generate_account(self, seed: int) -> None:
        gen = AccountGenerator(seed=seed)
        account = gen.generate(sink=MemorySink())

        assert re.fullmatch(r"\d{6}-\d", account.account_number)
        assert Decimal("0") <= account.balance <= Decimal("20000")
        assert account.status is AccountStatus.ACTIVE

    def test_generate_batch(self, seed: int) -> None:
        gen = AccountGenerator(seed=seed, max_balance=100.0)
        accounts = list(gen.generate_batch(5, sink=MemorySink()))

        assert len(accounts) == 5
        assert all(a.balance <= Decimal("100") for a in accounts)

    def test_reproducible(self, seed: int) -> None:
        first = AccountGenerator(seed=seed).generate(sink=MemorySink())
        second = AccountGenerator(seed=seed).generate(sink=MemorySink())

        assert first.account_number == second.account_number
        assert first.balance == second.balance


class TestOperationGenerator:
    """Tests for OperationGenerator."""

    def test_amounts_only_on_money_movements(self, seed: int) -> None:
        gen = OperationGenerator(seed=seed, max_amount=50.0)

        for step in gen.generate_batch(200):
            if step.operation in (Operation.DEPOSIT, Operation.WITHDRAW):
                assert step.amount is not None
                assert Decimal("1") <= step.amount <= Decimal("50")
            else:
                assert step.amount is None

    def test_covers_all_operations(self, seed: int) -> None:
        gen = OperationGenerator(seed=seed)
        operations = {step.operation for step in gen.generate_batch(500)}

        assert operations == set(Operation)
