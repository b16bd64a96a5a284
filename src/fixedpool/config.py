import os
from typing import Optional

from pydantic import BaseModel, Field


# Helper functions for parsing environment variables
def get_str_env(key: str, default: Optional[str] = "") -> Optional[str]:
    return os.environ.get(key, default)

def get_int_env(key: str, default: int) -> int:
    try:
        return int(os.environ.get(key, str(default)))
    except ValueError:
        return default

def get_bool_env(key: str, default: bool) -> bool:
    value = os.environ.get(key, str(default)).lower()
    return value == "true"


# Default factory functions
def default_pool_size() -> int:
    return get_int_env("POOL_SIZE", 4)

def default_thread_name_prefix() -> str:
    return get_str_env("POOL_THREAD_NAME_PREFIX", "worker") or "worker"

def default_log_level() -> str:
    return get_str_env("LOG_LEVEL", "INFO")

def default_log_dir() -> str:
    return get_str_env("LOG_DIR", "logs")

def default_max_size_mb() -> int:
    return get_int_env("LOG_MAX_SIZE_MB", 10)

def default_backup_count() -> int:
    return get_int_env("LOG_BACKUP_COUNT", 5)

def default_use_color() -> bool:
    return get_bool_env("LOG_USE_COLOR", True)


class PoolConfig(BaseModel):
    """Defaults used when the CLI builds a pool."""
    size: int = Field(default_factory=default_pool_size)
    thread_name_prefix: str = Field(default_factory=default_thread_name_prefix)


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default_factory=default_log_level)
    log_dir: str = Field(default_factory=default_log_dir)
    max_size_mb: int = Field(default_factory=default_max_size_mb)
    backup_count: int = Field(default_factory=default_backup_count)
    use_color: bool = Field(default_factory=default_use_color)


class AppConfig(BaseModel):
    """Application configuration."""
    pool: PoolConfig = Field(default_factory=PoolConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Create a singleton config instance
config = AppConfig()
