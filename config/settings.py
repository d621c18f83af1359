"""
Order manager settings loaded from environment variables.

Uses Pydantic Settings for type-safe configuration with validation.
All settings can be overridden via ``ORDERS_``-prefixed environment variables
or a .env file.
"""

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from libs.common.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Order manager configuration.

    Example:
        >>> import os
        >>> os.environ["ORDERS_FIRST_ORDER_ID"] = "1000"
        >>> Settings().first_order_id
        1000
    """

    model_config = SettingsConfigDict(
        env_prefix="ORDERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    component_name: str = Field(
        default="order_manager",
        min_length=1,
        description="Name reported in the 'component' field of every log line",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    first_order_id: int = Field(
        default=1,
        ge=1,
        description="First identifier handed out by the order id generator",
    )

    @field_validator("log_level")
    @classmethod
    def log_level_known(cls, v: str) -> str:
        """Normalize to upper case and reject unknown level names."""
        level = v.upper()
        if not isinstance(getattr(logging, level, None), int):
            raise ValueError(f"Invalid log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with all configuration loaded.

    Raises:
        ConfigurationError: If an ORDERS_ variable or .env entry is invalid
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid order manager settings: {e}") from e
