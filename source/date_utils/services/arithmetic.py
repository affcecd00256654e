"""This module implements calendar arithmetic over immutable instants.

Month and year offsets clamp to the last valid day of the target month:
31 January plus one month is 28 February (29 in leap years) and
29 February plus one year is 28 February. Results never overflow into the
following month.
"""

from datetime import datetime, timedelta

from date_utils.exceptions.date_utils import InvalidDateError
from date_utils.providers.date import DateProvider, InstantLike
from dateutil.relativedelta import relativedelta


def add_days(date: InstantLike, days: int) -> datetime:
    """Shifts a date forward by a number of days.

    Args:
        date: The starting date.
        days: The number of days to add. Negative values subtract.

    Returns:
        A new datetime with the same wall-clock time.
    """
    return DateProvider.to_instant(date) + timedelta(days=days)


def subtract_days(date: InstantLike, days: int) -> datetime:
    """Shifts a date backward by a number of days.

    Args:
        date: The starting date.
        days: The number of days to subtract.

    Returns:
        A new datetime with the same wall-clock time.
    """
    return add_days(date, -days)


def add_months(date: InstantLike, months: int) -> datetime:
    """Shifts a date by whole calendar months, clamping the day of month.

    Args:
        date: The starting date.
        months: The number of months to add. Negative values subtract.

    Returns:
        A new datetime.
    """
    return DateProvider.to_instant(date) + relativedelta(months=months)


def subtract_months(date: InstantLike, months: int) -> datetime:
    """Shifts a date back by whole calendar months, clamping the day of month."""
    return add_months(date, -months)


def add_years(date: InstantLike, years: int) -> datetime:
    """Shifts a date by whole years; 29 February clamps to 28 February.

    Args:
        date: The starting date.
        years: The number of years to add. Negative values subtract.

    Returns:
        A new datetime.
    """
    return DateProvider.to_instant(date) + relativedelta(years=years)


def subtract_years(date: InstantLike, years: int) -> datetime:
    """Shifts a date back by whole years; 29 February clamps to 28 February."""
    return add_years(date, -years)


def set_day(date: InstantLike, day: int) -> datetime:
    """Returns a copy of the date with its day of month replaced.

    Args:
        date: The starting date.
        day: The new day of month.

    Returns:
        A new datetime in the same month and year.

    Raises:
        InvalidDateError: If the day does not exist in that month.
    """
    instant = DateProvider.to_instant(date)
    try:
        return instant.replace(day=day)
    except ValueError as e:
        raise InvalidDateError(f"Day {day} does not exist in {instant:%Y-%m}") from e
