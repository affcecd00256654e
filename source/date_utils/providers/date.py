"""This module provides centralized date-related constants and coercion."""

from datetime import date, datetime, time
from typing import TypeAlias

from date_utils.exceptions.date_utils import InvalidDateFormatError
from date_utils.providers.logging import LoggingProvider

InstantLike: TypeAlias = datetime | date | str


class DateProvider:
    """Provides centralized constants and methods for date handling.

    This class centralizes date-related formats and the coercion of loose
    inputs into calendar instants, so every operation interprets its
    arguments the same way.
    """

    DEFAULT_FORMAT_OPTIONS: dict[str, str] = {
        "day": "numeric",
        "month": "2-digit",
        "year": "numeric",
    }

    @classmethod
    def default_format_options(cls) -> dict[str, str | None]:
        """Returns a fresh copy of the default format options.

        Returns:
            A new dictionary the caller is free to modify.
        """
        return dict(cls.DEFAULT_FORMAT_OPTIONS)

    @staticmethod
    def to_instant(value: InstantLike) -> datetime:
        """Coerces a date-like value into a calendar instant.

        Strings are parsed strictly as ISO 8601 (``1999-03-30``,
        ``1999-03-30 00:01:46``, ``1999-03-30T00:01:46-03:00``). A plain
        ``date`` becomes midnight of that day. A ``datetime`` is returned
        as is, since it is immutable.

        Args:
            value: The value to coerce.

        Returns:
            The corresponding datetime.

        Raises:
            InvalidDateFormatError: If the value cannot be interpreted as a
                calendar instant.
        """
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time.min)
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value.strip())
            except ValueError as e:
                LoggingProvider().get_logger().warning(f"Could not parse '{value}' as a date: {e}")
                raise InvalidDateFormatError(f"Invalid date format: '{value}'") from e

        LoggingProvider().get_logger().warning(f"Unsupported date value of type {type(value).__name__}")
        raise InvalidDateFormatError(f"Cannot interpret value of type {type(value).__name__} as a date")
