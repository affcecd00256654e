"""Locale-aware date formatting and calendar arithmetic helpers."""

from date_utils.exceptions.date_utils import (
    DateUtilsError,
    FormatOptionError,
    InvalidDateError,
    InvalidDateFormatError,
    UnsupportedLocaleError,
)
from date_utils.providers.date import DateProvider
from date_utils.services import (
    add_days,
    add_months,
    add_years,
    bigger_than,
    format_to_string,
    less_than,
    set_day,
    subtract_days,
    subtract_months,
    subtract_years,
)

__all__ = [
    "DateProvider",
    "DateUtilsError",
    "FormatOptionError",
    "InvalidDateError",
    "InvalidDateFormatError",
    "UnsupportedLocaleError",
    "add_days",
    "add_months",
    "add_years",
    "bigger_than",
    "format_to_string",
    "less_than",
    "set_day",
    "subtract_days",
    "subtract_months",
    "subtract_years",
]
