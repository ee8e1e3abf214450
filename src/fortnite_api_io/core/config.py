"""
Configuration management using Pydantic Settings.

Loads client options from environment variables so that applications can
build a client without threading the API key through their own config.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables prefixed ``FORTNITE_API_``
- Type validation via Pydantic
- ``to_client_config()`` bridges to the immutable ClientConfig value object

Usage:
    from fortnite_api_io.core.config import get_settings

    settings = get_settings()
    api = FortniteAPI.from_settings(settings)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fortnite_api_io.domain.enums import DEFAULT_LANGUAGE, supports_language
from fortnite_api_io.domain.value_objects import ClientConfig


class Settings(BaseSettings):
    """
    Client settings (flat structure).

    Configuration precedence:
        1. Environment variables (``FORTNITE_API_KEY``, ...)
        2. ``.env`` file in the working directory
        3. Default values
    """

    api_key: str | None = Field(
        default=None,
        validation_alias="fortnite_api_key",
        description="fortniteapi.io API key (sent as the Authorization header)",
    )
    default_language: str = Field(
        default=DEFAULT_LANGUAGE,
        description="Default response language (en, ar, de, es, es-419, fr, ...)",
    )
    ignore_warnings: bool = Field(
        default=False,
        description="Suppress deprecation notices for legacy methods",
    )
    request_timeout: float | None = Field(
        default=None,
        gt=0,
        description="HTTP request timeout in seconds (unset = no timeout)",
    )

    model_config = SettingsConfigDict(
        env_prefix="FORTNITE_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("default_language")
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        """
        Validate the default language against the supported codes.

        Args:
            v: Language code. Empty falls back to the default language.

        Returns:
            str: Validated language code.

        Raises:
            ValueError: If the language is not supported.
        """
        if not v:
            return DEFAULT_LANGUAGE
        if not supports_language(v):
            raise ValueError(f"Supplied default language {v} is not supported")
        return str(v)

    def to_client_config(self) -> ClientConfig:
        """Build the immutable client configuration from these settings."""
        return ClientConfig(
            default_language=self.default_language,
            ignore_warnings=self.ignore_warnings,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Settings loaded from the environment (cached).
    """
    return Settings()
