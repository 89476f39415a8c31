"""Configuration utilities for the dice roller hosts."""

from __future__ import annotations

import os
import random
from functools import lru_cache
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

# Load environment variables from a local .env if present.
load_dotenv()


AllowedLogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    """Runtime configuration derived from environment variables."""

    telegram_bot_token: str = Field(default="", alias="TELEGRAM_BOT_TOKEN")
    log_level: AllowedLogLevel = Field(default="INFO", alias="DICE_LOG_LEVEL")
    rng_seed: Optional[int] = Field(default=None, alias="DICE_RNG_SEED")
    max_expression_length: int = Field(
        default=200, alias="DICE_MAX_EXPRESSION_LENGTH"
    )
    max_dice: int = Field(default=100, alias="DICE_MAX_DICE")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = str(value).strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(
                "DICE_LOG_LEVEL must be one of DEBUG|INFO|WARNING|ERROR|CRITICAL."
            )
        return normalized

    @field_validator("rng_seed", mode="before")
    @classmethod
    def _blank_seed_is_unset(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("max_expression_length")
    @classmethod
    def _validate_max_length(cls, value: int) -> int:
        if not 1 <= value <= 10_000:
            raise ValueError(
                "DICE_MAX_EXPRESSION_LENGTH must be between 1 and 10000 inclusive."
            )
        return value

    @field_validator("max_dice")
    @classmethod
    def _validate_max_dice(cls, value: int) -> int:
        if not 1 <= value <= 10_000:
            raise ValueError("DICE_MAX_DICE must be between 1 and 10000 inclusive.")
        return value

    def has_telegram_credentials(self) -> bool:
        """True when a Telegram bot token is configured."""
        return bool(self.telegram_bot_token.strip())

    def make_rng(self) -> random.Random:
        """Return a random source, seeded when DICE_RNG_SEED is set."""
        return random.Random(self.rng_seed)


def _raw_environment() -> dict[str, Optional[str]]:
    """Snapshot environment variables relevant to the settings, skipping unset ones."""
    keys = [
        "TELEGRAM_BOT_TOKEN",
        "DICE_LOG_LEVEL",
        "DICE_RNG_SEED",
        "DICE_MAX_EXPRESSION_LENGTH",
        "DICE_MAX_DICE",
    ]
    return {key: os.getenv(key) for key in keys if os.getenv(key) is not None}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and memoize Settings from the environment."""
    try:
        return Settings(**_raw_environment())
    except ValidationError as exc:
        raise RuntimeError(f"Invalid dice roller configuration: {exc}") from exc


__all__ = [
    "Settings",
    "AllowedLogLevel",
    "get_settings",
]
