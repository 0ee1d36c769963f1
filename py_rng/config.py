"""Configuration management."""

import os
from pathlib import Path
from typing import Literal

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env for local/dev environments only for values missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Package settings pulled from PY_RNG_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PY_RNG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: Literal["json", "plain"] = Field(
        default="json", description="Logging format (plain or json)"
    )

    # Bit request validation
    bits_policy: Literal["strict", "clamp"] = Field(
        default="strict",
        description=(
            "How next(bits) treats bits outside 1..32: 'strict' raises "
            "InvalidArgument, 'clamp' clamps into range"
        ),
    )

    # Default source
    default_seed: str = Field(
        default="default", description="Seed used by the process-wide default source"
    )


# Instantiate singleton settings object
settings = Settings()
