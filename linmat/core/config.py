"""
Library configuration.

Centralized configuration for iteration limits, tolerances and logging,
read from ``LINMAT_``-prefixed environment variables.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .. import constants


class Settings(BaseSettings):
    """Library settings"""

    model_config = SettingsConfigDict(
        env_prefix="LINMAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Iterative methods
    MAX_ITER: int = Field(default=constants.MAX_ITER, ge=1)
    CONV_TOL: float = Field(default=constants.CONV_TOL, ge=0.0)

    # Comparison policy (0.0 means exact equality)
    SYMMETRY_TOL: float = Field(default=0.0, ge=0.0)
    SINGULAR_TOL: float = Field(default=0.0, ge=0.0)

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
