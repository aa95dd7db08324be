"""Configuration management for auditlens.

Loads configuration from environment variables using Pydantic models.
Provides sensible defaults for all settings while allowing override via
environment.

Provides:
- Config: Pydantic model with all application settings
- load_config: Factory function to create Config instance
"""

import os

from pydantic import BaseModel, Field


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "")
    try:
        return int(value)
    except ValueError:
        return default


class Config(BaseModel):
    """Application configuration loaded from environment.

    Attributes:
        whole_word: Only match severity keywords on word boundaries
            (AUDITLENS_WHOLE_WORD). When False, "Highlight" starts a High span.
        chain: Placeholder chain shown on every finding (AUDITLENS_CHAIN)
        file: Placeholder file shown on every finding (AUDITLENS_FILE)
        line: Placeholder line reference shown on every finding (AUDITLENS_LINE)
        cache_size: Number of report texts whose extraction is memoized
            (AUDITLENS_CACHE_SIZE)
    """

    # Extraction
    whole_word: bool = Field(
        default_factory=lambda: _env_bool("AUDITLENS_WHOLE_WORD", True)
    )
    cache_size: int = Field(
        default_factory=lambda: _env_int("AUDITLENS_CACHE_SIZE", 32)
    )

    # Placeholder location metadata (not derivable from narrative reports)
    chain: str = Field(
        default_factory=lambda: os.getenv("AUDITLENS_CHAIN", "Ethereum/All EVM chains")
    )
    file: str = Field(
        default_factory=lambda: os.getenv("AUDITLENS_FILE", "Contract.sol")
    )
    line: str = Field(
        default_factory=lambda: os.getenv("AUDITLENS_LINE", "Multiple lines")
    )


def load_config() -> Config:
    """Load configuration from environment.

    Creates a Config instance with values from environment variables,
    falling back to defaults for any unset values.

    Returns:
        Populated Config instance
    """
    return Config()
