"""Configuration management for account-state."""

import os
from dataclasses import dataclass, field

from account_state.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format_type: str = "standard"

    def __post_init__(self) -> None:
        self.level = self.level.upper()
        if self.level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.level!r}")
        if self.format_type not in ("standard", "json"):
            raise ConfigurationError(f"Unknown log format: {self.format_type!r}")

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Create logging config from LOG_LEVEL and LOG_FORMAT."""
        return cls(
            level=os.getenv("LOG_LEVEL", "WARNING"),
            format_type=os.getenv("LOG_FORMAT", "standard"),
        )


@dataclass
class RandomWalkConfig:
    """Random-walk scenario configuration."""

    steps: int = 20
    max_amount: float = 1000.0

    def __post_init__(self) -> None:
        if self.steps < 0:
            raise ConfigurationError("steps must be non-negative")
        if self.max_amount <= 0:
            raise ConfigurationError("max_amount must be positive")


@dataclass
class AccountStateConfig:
    """Main configuration for account-state."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    random_walk: RandomWalkConfig = field(default_factory=RandomWalkConfig)
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "AccountStateConfig":
        """Create config from environment variables."""
        try:
            logging_config = LoggingConfig.from_env()
            random_walk = RandomWalkConfig(
                steps=int(os.getenv("RANDOM_WALK_STEPS", "20")),
                max_amount=float(os.getenv("RANDOM_WALK_MAX_AMOUNT", "1000")),
            )
            seed = int(os.getenv("SEED")) if os.getenv("SEED") else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid environment value: {exc}") from exc

        return cls(logging=logging_config, random_walk=random_walk, seed=seed)
