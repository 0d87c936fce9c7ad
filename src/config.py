from __future__ import annotations

import logging
import sys
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Parser settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    log_level: str = "INFO"

    # Bullet splitting
    min_bullet_length: int = 10

    # Index chunk preparation
    chunk_max_words: int = 500
    chunk_overlap_words: int = 100

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for scripts and host applications."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
