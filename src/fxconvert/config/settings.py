# src/fxconvert/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a local .env file.

Files that USE this module:
- fxconvert.app (loads settings for logging and wiring)
- fxconvert.adapters.http.transport (HTTP timeout)
- fxconvert.adapters.providers.currencyfreaks (API key and endpoint URLs)
- fxconvert.application.session (default currency selection)

Files that this module USES:
- fxconvert.shared.validators (validation functions for settings)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from fxconvert.shared.validators import (
    validate_api_key,  # Validate API key format
    validate_base_url,  # Validate provider base URL
    validate_currency_code,  # Validate currency code format
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Rate provider ---
    api_key: str = Field(default="", alias="CURRENCYFREAKS_API_KEY")
    base_url: str = Field(
        default="https://api.currencyfreaks.com/v2.0", alias="CURRENCYFREAKS_BASE_URL"
    )

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Selection ---
    default_currency: str = Field(default="USD", alias="DEFAULT_CURRENCY")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="FXCONVERT_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def supported_currencies_url(self) -> str:
        """Endpoint listing every supported currency code."""
        return f"{self.base_url}/supported-currencies"

    @property
    def latest_rates_url(self) -> str:
        """Endpoint returning the latest rates (query parameters added per call)."""
        return f"{self.base_url}/rates/latest"

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate API key format (an empty key is allowed until a rate is requested)."""
        v = v.strip()
        if v and not validate_api_key(v):
            raise ValueError("Invalid CURRENCYFREAKS_API_KEY format")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not validate_base_url(v):
            raise ValueError("CURRENCYFREAKS_BASE_URL must be an http(s) URL")
        return v.rstrip("/")

    @field_validator("default_currency")
    @classmethod
    def validate_default_currency(cls, v: str) -> str:
        v = v.strip().upper()
        if not validate_currency_code(v):
            raise ValueError("DEFAULT_CURRENCY must be a currency code such as 'USD'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v


# Global settings instance
settings = Settings()
