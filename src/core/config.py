"""Process settings read from environment variables with pydantic-settings.

Nothing is mandatory: with an empty environment the app runs in development
mode, logs at INFO, formats for en_US and opens orders in USD.

Variables (case-insensitive):
    ENVIRONMENT, DEBUG, LOG_LEVEL, APP_NAME, APP_VERSION,
    DEFAULT_LOCALE, DEFAULT_CURRENCY

Usage:
    from src.core.config import settings

    handler = CreateSalesOrderHandler(..., default_currency=settings.default_currency)
    if settings.is_production:
        ...
"""

import re
from functools import lru_cache

from babel import Locale, UnknownLocaleError
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_CURRENCY_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")


class Settings(BaseSettings):
    """Flat application settings.

    Environment variables win over the defaults below; there is no env file.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment; selects the log renderer",
    )
    debug: bool = Field(default=False, description="Debug mode flag")
    log_level: str = Field(
        default="INFO",
        description="Lowest emitted log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    app_name: str = Field(default="Sales Orders", description="Service name")
    app_version: str = Field(default="0.1.0", description="Service version")

    default_locale: str = Field(
        default="en_US",
        description="Locale for display strings when a query names none",
    )
    default_currency: str = Field(
        default="USD",
        description="Currency for CreateSalesOrder commands without a currency_code",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Upper-case the level and reject names logging does not know.

        Raises:
            ValueError: For anything outside DEBUG/INFO/WARNING/ERROR/CRITICAL.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )
        return level

    @field_validator("default_locale")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Require a locale tag Babel has data for ("en-US" or "en_US").

        Raises:
            ValueError: If the tag is malformed or unknown.
        """
        try:
            Locale.parse(v.replace("-", "_"))
        except (UnknownLocaleError, ValueError) as e:
            raise ValueError(f"default_locale is not a known locale: {v!r}") from e
        return v

    @field_validator("default_currency")
    @classmethod
    def validate_default_currency(cls, v: str) -> str:
        """Require the same 3-uppercase-letter form Currency accepts.

        Raises:
            ValueError: If the code would be rejected by Currency.
        """
        if not _CURRENCY_CODE_PATTERN.match(v):
            raise ValueError("default_currency must be 3 uppercase letters")
        return v

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Build Settings once per process (``cache_clear()`` to reload)."""
    return Settings()


settings = get_settings()
