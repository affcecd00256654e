"""This module defines the configuration management for the date utilities.

It uses Pydantic's BaseSettings to create a strongly-typed configuration
class that reads from environment variables and .env files.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BUILTIN_LOCALE = "pt-br"


class Config(BaseSettings):
    """A Pydantic model for managing library settings.

    It automatically loads configuration from environment variables and .env files.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = "INFO"

    DEFAULT_LOCALE: str = BUILTIN_LOCALE

    @field_validator("DEFAULT_LOCALE")
    @classmethod
    def strip_default_locale(cls, value: str) -> str:
        """Normalizes surrounding whitespace in the configured locale.

        Args:
            value: The raw locale identifier.

        Returns:
            The stripped identifier, or the built-in default when empty.
        """
        return value.strip() or BUILTIN_LOCALE


class ConfigProvider:
    """A provider class that acts as a factory for the library configuration.

    It does not hold state but provides a method to create fresh config instances.
    """

    @staticmethod
    def get_config() -> Config:
        """Factory method that instantiates and returns a new Config object.

        Calling this function will always create a new instance of the Config model,
        which forces Pydantic to reload and re-validate all settings from the
        current environment variables.

        Returns:
            A new, validated Config object.
        """
        return Config()
