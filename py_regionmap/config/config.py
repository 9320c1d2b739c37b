from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

import os

# Load .env for local/dev environments only for values missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REGIONMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="plain", description="Logging format (plain or json)")

    # Map Generation Configuration
    default_map_width: int = Field(default=240, description="Default map width in pixels")
    default_map_height: int = Field(default=160, description="Default map height in pixels")
    default_num_cities: int = Field(default=10, description="Default number of cities to place")
    max_map_width: int = Field(default=4096, description="Max allowed map width in pixels")
    max_map_height: int = Field(default=4096, description="Max allowed map height in pixels")


# Instantiate singleton settings object
settings = Settings()
