"""This module sets up the centralized logger for the date utilities.

It provides a `LoggingProvider` singleton that configures the
``date_utils`` logger once and dispenses it to the rest of the package.
"""

from __future__ import annotations

import sys
from logging import Formatter, Logger, StreamHandler, _nameToLevel, getLogger

from date_utils.providers.config import ConfigProvider

__all__ = ["Logger", "LoggingProvider"]

LOGGER_NAME = "date_utils"


class LoggingProvider:
    """Provides a configured logger instance for the package.

    This class uses a Singleton pattern to ensure that there is only one
    instance of the logger, configured once based on settings from the
    config provider.
    """

    _instance: LoggingProvider | None = None
    _logger: Logger | None = None
    _is_configured: bool = False

    def __new__(cls) -> LoggingProvider:
        """Implements the Singleton pattern.

        Returns:
            The singleton instance of the LoggingProvider.
        """
        if not cls._instance:  # pragma: no cover
            cls._instance = super().__new__(cls)
        return cls._instance

    def _configure_logger(self, level_override: str | None = None) -> Logger:
        """Configures the package logger. This is called only once.

        Args:
            level_override: A log level name that takes precedence over
                the configured ``LOG_LEVEL``.

        Returns:
            The configured logger instance.
        """
        logger = getLogger(LOGGER_NAME)

        if self._is_configured:  # pragma: no cover
            return logger

        log_level_str = level_override or ConfigProvider.get_config().LOG_LEVEL
        numeric_level = _nameToLevel.get(log_level_str.upper(), _nameToLevel["INFO"])
        logger.setLevel(numeric_level)

        if not logger.handlers:
            handler = StreamHandler(sys.stderr)
            formatter = Formatter(
                "%(asctime)s - %(name)s - [%(levelname)s] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        self._is_configured = True
        logger.debug(f"Logger configured with level: {log_level_str}")
        return logger

    def get_logger(self, level_override: str | None = None) -> Logger:
        """Returns the configured logger instance.

        The logger is configured lazily on first use, so importing the
        package never reads configuration.

        Args:
            level_override: A log level name applied when the logger is
                configured, or immediately when it already is.

        Returns:
            The configured logger instance.
        """
        if not self._logger:
            self._logger = self._configure_logger(level_override)
        elif level_override:
            self._logger.setLevel(_nameToLevel.get(level_override.upper(), self._logger.level))
        return self._logger
