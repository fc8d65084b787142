#!/usr/bin/env python3
"""Drive a generated account through a seeded random walk.

Prints every account message followed by a one-line summary per step.
Defaults come from the environment (see ``AccountStateConfig.from_env``).
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from account_state.config import AccountStateConfig
from account_state.logging import setup_logging
from account_state.scenarios.random_walk import RandomWalkScenario
from account_state.sinks import ConsoleSink


def main() -> None:
    """Run the random walk scenario."""
    config = AccountStateConfig.from_env()

    parser = argparse.ArgumentParser(description="Random walk over the account state machine")
    parser.add_argument(
        "--steps",
        type=int,
        default=config.random_walk.steps,
        help=f"Number of operations (default: {config.random_walk.steps})",
    )
    parser.add_argument(
        "--max-amount",
        type=float,
        default=config.random_walk.max_amount,
        help=f"Largest deposit/withdraw amount (default: {config.random_walk.max_amount})",
    )
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed")
    parser.add_argument("--log-level", type=str, default=config.logging.level, help="Log level")
    args = parser.parse_args()

    setup_logging(level=args.log_level, format_type=config.logging.format_type)

    sink = ConsoleSink()
    scenario = RandomWalkScenario(
        steps=args.steps,
        max_amount=args.max_amount,
        seed=args.seed,
        sink=sink,
    )
    results = scenario.run()

    print(f"\n{'=' * 60}")
    print(f"Random walk: {len(results)} steps, {sink.count} messages")
    print("=" * 60)
    for index, result in enumerate(results, start=1):
        print(
            f"{index:3d}. {str(result.step):<20} "
            f"{result.status_before.value:>9} -> {result.status_after.value:<9} "
            f"balance {result.balance_after}"
        )


if __name__ == "__main__":
    main()
