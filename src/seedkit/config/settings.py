from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SEEDKIT_",
        env_file=".env",
        extra="ignore",
    )

    # Runtime
    ENVIRONMENT: str = Field(default="dev", description="Environment name")

    # Command line
    APP_NAME: str = Field(
        default="seeder", description="Display name used in usage text"
    )
    REGISTRY: str = Field(
        default="seedkit.demo:build_registry",
        description="Import path (module:attr) of a SeederRegistry or a factory returning one",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="DEBUG|INFO|WARNING|ERROR")
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Demo seeders
    DATABASE_URL: str = Field(default="sqlite:///seedkit_dev.db")
    FAKER_LOCALE: str = Field(default="en_US", description="Faker locale for demo data")
    FAKER_SEED: Optional[int] = Field(
        default=None, description="Seed Faker for reproducible demo data"
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
