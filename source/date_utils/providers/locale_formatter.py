"""This module provides locale-aware rendering of calendar instants.

The `LocaleFormatter` protocol is the seam between the date utilities and
a locale database. `BabelLocaleFormatter` fills it with Babel's CLDR data:
it picks the locale's standard date pattern closest to the requested
options, rewrites each field to the requested width and renders the
result.
"""

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Protocol

from babel import Locale, UnknownLocaleError
from babel.dates import get_date_format, get_datetime_format, get_time_format, parse_pattern
from date_utils.exceptions.date_utils import FormatOptionError, UnsupportedLocaleError
from date_utils.models.format_options import FormatOptions
from date_utils.providers.logging import Logger, LoggingProvider
from pydantic import ValidationError

_PATTERN_TOKEN = re.compile(r"'(?:[^']|'')*'|([A-Za-z])\1*|[^A-Za-z']+")

_DATE_FIELDS = frozenset("GyMLd")
_WEEKDAY_FIELDS = frozenset("Eec")
_HOUR_FIELDS = frozenset("HhKk")

_MONTH_WIDTHS = {"2-digit": 2, "short": 3, "long": 4, "narrow": 5}
_WEEKDAY_WIDTHS = {"short": 1, "long": 4, "narrow": 5}


class LocaleFormatter(Protocol):
    """A capability that renders an instant for a locale."""

    def format(self, instant: datetime, options: Mapping[str, str | None], locale: str) -> str:
        """Renders the instant as a localized string."""
        ...


class BabelLocaleFormatter:
    """Renders calendar instants using Babel's CLDR locale data."""

    def __init__(self) -> None:
        """Initializes the BabelLocaleFormatter."""
        self.logger: Logger = LoggingProvider().get_logger()

    def format(self, instant: datetime, options: Mapping[str, str | None], locale: str) -> str:
        """Renders the instant according to the options and locale.

        Args:
            instant: The calendar instant to render.
            options: The field verbosity options, already merged over the
                defaults.
            locale: The locale identifier, e.g. ``pt-br`` or ``en_US``.

        Returns:
            The localized string.

        Raises:
            FormatOptionError: If an option key or value is not recognized.
            UnsupportedLocaleError: If the locale is unknown.
        """
        format_options = self._parse_options(options)
        babel_locale = self._parse_locale(locale)

        pattern = self.build_pattern(format_options, babel_locale)
        self.logger.debug(f"Rendering {instant.isoformat()} with pattern '{pattern}' for locale {babel_locale}")
        return parse_pattern(pattern).apply(instant, babel_locale)

    def build_pattern(self, options: FormatOptions, locale: Locale) -> str:
        """Builds the CLDR pattern that renders the requested fields.

        Args:
            options: The validated format options.
            locale: The Babel locale.

        Returns:
            A CLDR date/time pattern string.
        """
        style = self._select_date_style(options)
        date_pattern = get_date_format(style, locale=locale).pattern
        if options.weekday and style != "full":
            date_pattern = self._add_weekday(date_pattern, get_date_format("full", locale=locale).pattern)
        date_pattern = self._rewrite_pattern(date_pattern, options)
        if not options.has_time:
            return date_pattern

        time_pattern = self._select_time_fields(get_time_format("medium", locale=locale).pattern, options)
        time_pattern = self._rewrite_pattern(time_pattern, options)
        glue = str(get_datetime_format(style, locale=locale))
        return glue.replace("{0}", time_pattern).replace("{1}", date_pattern)

    def _parse_options(self, options: Mapping[str, str | None]) -> FormatOptions:
        """Validates raw options into a FormatOptions model.

        Keys whose value is None are dropped, so optional fields can be
        switched off by the caller.
        """
        present = {key: value for key, value in options.items() if value is not None}
        try:
            return FormatOptions.model_validate(present)
        except ValidationError as e:
            self.logger.warning(f"Invalid format options {dict(options)}: {e.error_count()} error(s)")
            raise FormatOptionError(f"Invalid format options: {dict(options)}") from e

    def _parse_locale(self, locale: str) -> Locale:
        """Parses a locale identifier, accepting both '-' and '_' separators."""
        identifier = locale.strip().replace("-", "_")
        try:
            return Locale.parse(identifier)
        except (UnknownLocaleError, ValueError) as e:
            self.logger.warning(f"Unsupported locale '{locale}': {e}")
            raise UnsupportedLocaleError(f"Unsupported locale: {locale!r}") from e

    @staticmethod
    def _select_date_style(options: FormatOptions) -> str:
        """Picks the locale's standard date format closest to the options.

        The ``full`` format is only used when it matches both the weekday
        and a long month; other weekday requests get the weekday added to
        the format chosen for the month.

        Args:
            options: The validated format options.

        Returns:
            One of ``full``, ``long``, ``medium`` or ``short``.
        """
        if options.month == "long":
            return "full" if options.weekday else "long"
        if options.month in ("short", "narrow"):
            return "medium"
        return "short"

    @staticmethod
    def _add_weekday(pattern: str, full_pattern: str) -> str:
        """Adds the weekday to a date pattern the way the full format places it.

        The weekday and the literal text joining it to the date fields are
        taken from the locale's full pattern and put before or after the
        given pattern.

        Args:
            pattern: A date pattern without a weekday.
            full_pattern: The locale's full date pattern.

        Returns:
            The date pattern with a weekday field.
        """
        tokens = _tokenize(full_pattern)
        weekday_index = next((i for i, token in enumerate(tokens) if _field(token) in _WEEKDAY_FIELDS), None)
        date_indexes = [i for i, token in enumerate(tokens) if _field(token) in _DATE_FIELDS]
        if weekday_index is None or not date_indexes:
            return f"EEEE {pattern}"
        if weekday_index < date_indexes[0]:
            return "".join(tokens[weekday_index : date_indexes[0]]) + pattern
        return pattern + "".join(tokens[date_indexes[-1] + 1 : weekday_index + 1])

    @staticmethod
    def _select_time_fields(pattern: str, options: FormatOptions) -> str:
        """Keeps only the requested time fields of a CLDR time pattern.

        Each dropped field takes one neighbouring separator with it: the one
        before it when a field was already kept, otherwise the one after.
        The day period and zone fields follow the hour.

        Args:
            pattern: The locale's time pattern with hour, minute and second.
            options: The validated format options.

        Returns:
            The time pattern reduced to the requested fields.
        """
        wanted = {"m": options.minute is not None, "s": options.second is not None}
        kept: list[str] = []
        has_field = False
        drop_next_literal = False

        for token in _tokenize(pattern):
            field = _field(token)
            if field is None:
                if drop_next_literal:
                    drop_next_literal = False
                    continue
                kept.append(token)
            elif wanted.get(field, options.hour is not None):
                kept.append(token)
                has_field = True
                drop_next_literal = False
            elif has_field:
                if kept and _field(kept[-1]) is None:
                    kept.pop()
            else:
                drop_next_literal = True

        return "".join(kept)

    @staticmethod
    def _rewrite_pattern(pattern: str, options: FormatOptions) -> str:
        """Rewrites the width of each field in a CLDR pattern.

        Quoted literals are left untouched. A ``numeric`` request keeps the
        locale's own width for date and hour fields that are already
        numeric. Numeric minutes and seconds stay zero-padded next to an
        hour and are unpadded on their own.

        Args:
            pattern: The CLDR pattern to rewrite.
            options: The validated format options.

        Returns:
            The rewritten pattern.
        """

        def replace(match: re.Match[str]) -> str:
            token = match.group(0)
            letter = match.group(1)
            if letter is None:
                return token
            width = len(token)

            if letter == "d":
                return "dd" if options.day == "2-digit" else token
            if letter in ("M", "L"):
                if options.month == "numeric":
                    return letter if width >= 3 else token
                return letter * _MONTH_WIDTHS[options.month]
            if letter == "y":
                return "yy" if options.year == "2-digit" else "y"
            if letter in _WEEKDAY_FIELDS and options.weekday:
                return "E" * _WEEKDAY_WIDTHS[options.weekday]
            if letter in _HOUR_FIELDS and options.hour == "2-digit":
                return letter * 2
            if letter in ("m", "s"):
                style = options.minute if letter == "m" else options.second
                padded = style == "2-digit" or options.hour is not None
                return letter * 2 if padded else letter
            return token

        return _PATTERN_TOKEN.sub(replace, pattern)


def _tokenize(pattern: str) -> list[str]:
    """Splits a CLDR pattern into field, quoted and literal tokens."""
    return [match.group(0) for match in _PATTERN_TOKEN.finditer(pattern)]


def _field(token: str) -> str | None:
    """Returns the field letter of a pattern token, or None for literals."""
    return token[0] if token[0].isalpha() else None
