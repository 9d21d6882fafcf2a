"""Configuration for refstore, loaded from environment variables."""

import os
from dataclasses import dataclass

from .constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_QUERY_SIZE,
    DEFAULT_UPPERCASE,
    VALID_LOG_LEVELS,
)


@dataclass
class RefStoreConfig:
    """Reference store configuration loaded from environment variables."""

    # Reference settings
    reference: str | None = None
    uppercase: bool = DEFAULT_UPPERCASE

    # Query settings
    max_query_size: int = DEFAULT_MAX_QUERY_SIZE

    # Logging
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        """Validate config values."""
        if self.max_query_size < 1:
            raise ValueError(f"max_query_size must be at least 1, got {self.max_query_size}")

        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}, got '{self.log_level}'")

    @classmethod
    def from_env(cls) -> "RefStoreConfig":
        """Create config from environment variables."""
        env = os.environ

        return cls(
            reference=env.get("REFSTORE_REFERENCE") or None,
            uppercase=env.get("REFSTORE_UPPERCASE", str(DEFAULT_UPPERCASE)).lower() == "true",
            max_query_size=int(env.get("REFSTORE_MAX_QUERY_SIZE", str(DEFAULT_MAX_QUERY_SIZE))),
            log_level=env.get("REFSTORE_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
