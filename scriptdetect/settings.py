from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SD_", env_file=".env", extra="ignore")

    log_level: str = "INFO"

    # Sharding is opt-in: under the GIL threads add no speed, and a single
    # pass stops as soon as one script holds more than half of the text.
    sharding_enabled: bool = False
    max_shards: int = Field(default=8, ge=1)
    min_shard_chars: int = Field(default=4096, ge=1)
    max_workers: int = Field(default=4, ge=1)


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
