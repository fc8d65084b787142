"""Fixed demo run of the account state machine."""

from account_state.config import LoggingConfig
from account_state.exceptions import ConfigurationError
from account_state.logging import get_logger, setup_logging
from account_state.models.account import Account
from account_state.scenarios.steps import (
    DEMO_ACCOUNT_NUMBER,
    DEMO_OPENING_BALANCE,
    DEMO_STEPS,
    apply_step,
)
from account_state.sinks.base import MessageSink

logger = get_logger(__name__)


def run_demo(sink: MessageSink | None = None) -> Account:
    """Run the demo sequence and return the account it ends with."""
    account = Account(DEMO_ACCOUNT_NUMBER, DEMO_OPENING_BALANCE, sink=sink)
    for step in DEMO_STEPS:
        logger.debug("Demo step: %s", step)
        apply_step(account, step)
    return account


def main() -> int:
    """Entry point: configure logging from the environment and run the demo.

    Only the logging settings are read. Invalid values fall back to the
    defaults with a warning, so the demo itself always runs.
    """
    config_error: ConfigurationError | None = None
    try:
        config = LoggingConfig.from_env()
    except ConfigurationError as exc:
        config_error = exc
        config = LoggingConfig()

    setup_logging(level=config.level, format_type=config.format_type)
    if config_error is not None:
        logger.warning("Ignoring logging environment: %s", config_error)

    run_demo()
    return 0
