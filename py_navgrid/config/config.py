from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

import os

from ..core.path_search import SearchStrategy

# Load .env for local/dev environments only for values missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Navigation settings pulled from NAVGRID_* environment variables."""

    # Grid Configuration
    grid_step: float = Field(default=100.0, gt=0, description="Spacing between grid cells in world units")
    height_offset: float = Field(default=25.0, description="Height added above the sampled terrain elevation")

    # Walkability Configuration
    probe_radius: float = Field(default=1.0, ge=0, description="Radius of the obstacle probe sphere")

    # Search Configuration
    default_strategy: str = Field(default="astar", description="Strategy used when none is given")
    update_interval_frames: int = Field(default=300, gt=0, description="Frames between path recomputations")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (console or json)")

    @field_validator("default_strategy")
    @classmethod
    def check_strategy(cls, value: str) -> str:
        return SearchStrategy.parse(value).value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level {value!r}")
        return value

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("console", "json"):
            raise ValueError(f"Unknown log format {value!r}")
        return value

    @property
    def strategy(self) -> SearchStrategy:
        return SearchStrategy(self.default_strategy)

    class Config:
        env_prefix = "NAVGRID_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
