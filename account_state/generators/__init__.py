"""Seeded generators for accounts and operation sequences."""

from account_state.generators.account import AccountGenerator, OperationGenerator
from account_state.generators.base import BaseGenerator

__all__ = ["AccountGenerator", "BaseGenerator", "OperationGenerator"]
