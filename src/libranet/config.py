"""Configuration management for libranet.

Loads configuration from environment variables and provides defaults.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import InvalidDurationFormatError
from .utils import parse_duration

# Load .env file if present
load_dotenv()


@dataclass
class Config:
    """Application configuration."""

    # Lending
    default_loan_duration: str  # ISO-8601 duration
    default_fine_per_day: float

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            default_loan_duration=os.environ.get("LIBRANET_DEFAULT_LOAN_DURATION", "PT72H"),
            default_fine_per_day=float(
                os.environ.get("LIBRANET_DEFAULT_FINE_PER_DAY", "10")
            ),
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        try:
            parse_duration(self.default_loan_duration)
        except InvalidDurationFormatError as e:
            errors.append(f"LIBRANET_DEFAULT_LOAN_DURATION: {e}")

        if self.default_fine_per_day < 0:
            errors.append(
                f"LIBRANET_DEFAULT_FINE_PER_DAY must be non-negative: {self.default_fine_per_day}"
            )

        return errors


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
