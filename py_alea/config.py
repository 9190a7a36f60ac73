"""Configuration management."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Generation
    default_seed: str = Field(
        default="default", description="Seed used when none is supplied"
    )
    default_variant: Literal["exact", "fast"] = Field(
        default="exact", description="Alea variant used by create_prng"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["json", "plain"] = Field(
        default="json", description="Logging format (plain or json)"
    )

    class Config:
        env_prefix = "ALEA_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
