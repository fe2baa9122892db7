# todo_api/config.py
"""
Runtime settings, read from TODO_API_* environment variables (or a .env file).
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TODO_API_",
        env_file=".env",
        extra="ignore",
    )

    title: str = "Todo API"
    store_backend: Literal["memory", "sql"] = "memory"
    log_level: str = "INFO"

    # /tasks/<rest> -> /todos/<rest>
    legacy_prefix: str = "tasks"
    redirect_status_code: int = 308

    host: str = "127.0.0.1"
    port: int = 8000


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
