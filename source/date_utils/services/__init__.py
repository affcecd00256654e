"""This module initializes the services package.

It re-exports the date operations to provide a flatter import structure.
"""

from date_utils.services.arithmetic import (
    add_days,
    add_months,
    add_years,
    set_day,
    subtract_days,
    subtract_months,
    subtract_years,
)
from date_utils.services.comparison import bigger_than, less_than
from date_utils.services.formatting import format_to_string

__all__ = [
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
