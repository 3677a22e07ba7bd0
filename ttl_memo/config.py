"""Configuration management for ttl_memo."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuration settings for ttl_memo.

    Memoizer options (timeout, resolver, scheduler) are always passed in code;
    only process-wide concerns live here.
    """

    # Logging
    log_enabled: bool = False  # Emit loguru DEBUG records for hits, misses and expiries

    class Config:
        env_prefix = "TTL_MEMO_"
        env_file = ".env"
        extra = "ignore"


settings = Settings()
