"""This module implements ordinal comparison between date-like values."""

from date_utils.providers.date import DateProvider, InstantLike


def _timestamp(value: InstantLike) -> float:
    """Converts a date-like value to a POSIX timestamp.

    Naive values are interpreted in the host's local time zone.
    """
    return DateProvider.to_instant(value).timestamp()


def bigger_than(first: InstantLike, second: InstantLike) -> bool:
    """Checks whether the first date is strictly later than the second.

    Args:
        first: A datetime, date or ISO 8601 string.
        second: A datetime, date or ISO 8601 string.

    Returns:
        True if ``first`` denotes a later instant than ``second``.
    """
    return _timestamp(first) > _timestamp(second)


def less_than(first: InstantLike, second: InstantLike) -> bool:
    """Checks whether the first date is strictly earlier than the second.

    Args:
        first: A datetime, date or ISO 8601 string.
        second: A datetime, date or ISO 8601 string.

    Returns:
        True if ``first`` denotes an earlier instant than ``second``.
    """
    return _timestamp(first) < _timestamp(second)
