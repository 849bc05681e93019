from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    app_env: str = "dev"
    log_level: str = "INFO"

    # Storage
    storage_backend: Literal["memory", "filesystem", "redis"] = "filesystem"
    messages_dir: str = "messages"
    redis_url: str = "redis://redis:6379/0"
    redis_key_prefix: str = "msg:"

    # Policies
    max_message_length: int = 10_000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
