"""
Configuration management for the customer manager service
"""


import threading
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    app_name: str = Field(default="Customer Manager", description="Service name")

    # Database configuration
    database_url: str = Field(
        default="sqlite:///data/customers.db", description="Database connection URL"
    )

    # Application settings
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: str = Field(default="logs", description="Directory for log files")
    enable_file_logging: bool = Field(
        default=True, description="Write rotating log files besides the console"
    )
    environment: str = Field(
        default="development", description="Application environment"
    )

    # Web server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="HTTP port", gt=0, lt=65536)

    # Cache settings
    cache_names: List[str] = Field(
        default=["customers", "customer_list"],
        description="Caches created when the application starts",
    )
    cache_ttl_seconds: int = Field(
        default=300, description="Default time to live for cache entries", gt=0
    )
    clear_caches_on_startup: bool = Field(
        default=False, description="Clear every cache when the context is refreshed"
    )
    startup_workers: int = Field(
        default=4, description="Threads used to walk caches at startup", gt=0
    )
    cache_maintenance_interval: int = Field(
        default=60, description="Seconds between expired-entry sweeps", gt=0
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment"""
        valid_envs = ["development", "test", "staging", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("cache_names")
    @classmethod
    def validate_cache_names(cls, v: List[str]) -> List[str]:
        """Strip blanks and duplicates while keeping order"""
        names: List[str] = []
        for name in v:
            cleaned = name.strip()
            if cleaned and cleaned not in names:
                names.append(cleaned)
        return names


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config() -> None:
    """Drop the cached settings so the next call re-reads the environment"""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
