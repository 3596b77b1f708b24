"""
Settings

Runtime configuration, read from the environment (prefix DSAVIZ_) or a
.env file in the working directory.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Playback: when unset, each algorithm uses its own preset (sort 50, search 200, graph 400)
    DEFAULT_DELAY_MS: Optional[float] = Field(default=None, ge=0)

    # Run registry (web API)
    MAX_RUNS: int = Field(default=100, ge=1)

    # Data generation
    SORT_ARRAY_SIZE: int = Field(default=30, ge=0)
    SEARCH_ARRAY_SIZE: int = Field(default=20, ge=0)
    MAX_ARRAY_SIZE: int = Field(default=200, ge=1)
    KEY_MIN: int = 1
    KEY_MAX: int = 100

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Web server
    HOST: str = "127.0.0.1"
    PORT: int = 5000
    DEBUG: bool = False

    model_config = SettingsConfigDict(env_prefix="DSAVIZ_", env_file=".env", extra="ignore")


# Singleton instance
settings = Settings()
