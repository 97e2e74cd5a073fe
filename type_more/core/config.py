"""
Hashing defaults using Pydantic Settings.

The only tunables in the library are the default work factors used when a
caller hashes a password without giving an explicit cost. Defaults can be
overridden with TYPE_MORE_* environment variables.

Usage:
    from type_more.core.config import get_settings

    settings = get_settings()
    rounds = settings.bcrypt_rounds
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Default hashing parameters.

    Configuration precedence:
        1. Environment variables (TYPE_MORE_BCRYPT_ROUNDS, ...)
        2. Default values

    Returns:
        Settings: Hashing defaults.
    """

    bcrypt_rounds: int = Field(
        default=12,
        description="Default bcrypt cost factor when none is given (4-31, 12 = ~250ms)",
    )
    argon2_time_cost: int = Field(
        default=3,
        ge=1,
        description="Default argon2 time cost (iterations) when none is given",
    )
    argon2_memory_cost: int = Field(
        default=65536,
        ge=8,
        description="Argon2 memory cost in KiB (64 MiB)",
    )
    argon2_parallelism: int = Field(
        default=4,
        ge=1,
        description="Argon2 lanes/threads",
    )

    model_config = SettingsConfigDict(
        env_prefix="TYPE_MORE_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within the range bcrypt accepts.

        Args:
            v: Number of bcrypt rounds.

        Returns:
            int: Validated bcrypt rounds.

        Raises:
            ValueError: If rounds are not between 4 and 31.
        """
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
