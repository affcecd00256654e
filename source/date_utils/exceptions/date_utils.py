"""This module defines custom exceptions raised by the date utilities."""


class DateUtilsError(Exception):
    """Base exception for errors raised by the date utilities."""

    pass


class InvalidDateFormatError(DateUtilsError, ValueError):
    """Raised when a value cannot be interpreted as a calendar instant."""

    pass


class InvalidDateError(DateUtilsError, ValueError):
    """Raised when a calendar field is out of range for the target month."""

    pass


class FormatOptionError(DateUtilsError, ValueError):
    """Raised by the locale formatting layer for unrecognized format options."""

    pass


class UnsupportedLocaleError(DateUtilsError, ValueError):
    """Raised when the locale formatting layer does not know a locale."""

    pass
