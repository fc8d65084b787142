"""Scenarios that drive accounts through sequences of operations."""

from account_state.scenarios.steps import (
    DEMO_ACCOUNT_NUMBER,
    DEMO_OPENING_BALANCE,
    DEMO_STEPS,
    Step,
    StepResult,
    apply_step,
    run_steps,
)

__all__ = [
    "DEMO_ACCOUNT_NUMBER",
    "DEMO_OPENING_BALANCE",
    "DEMO_STEPS",
    "Step",
    "StepResult",
    "apply_step",
    "run_steps",
]
