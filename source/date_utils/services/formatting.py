"""This module renders dates as localized, human-readable strings."""

from collections.abc import Mapping

from date_utils.providers.config import ConfigProvider
from date_utils.providers.date import DateProvider, InstantLike
from date_utils.providers.locale_formatter import BabelLocaleFormatter, LocaleFormatter


def format_to_string(
    date: InstantLike,
    options: Mapping[str, str | None] | None = None,
    locale: str | None = None,
    formatter: LocaleFormatter | None = None,
) -> str:
    """Renders a date for a locale.

    The given options are merged over the defaults
    (``{"day": "numeric", "month": "2-digit", "year": "numeric"}``), each
    explicit field overriding its default. Options are not validated here;
    the formatter rejects what it does not understand.

    Args:
        date: The date to render.
        options: Field verbosity overrides, e.g. ``{"month": "long"}``.
        locale: The locale identifier. Defaults to the configured
            ``DEFAULT_LOCALE``.
        formatter: The locale formatter to use. Defaults to Babel.

    Returns:
        The localized string, e.g. ``"30 de março de 1999"``.
    """
    instant = DateProvider.to_instant(date)
    merged = DateProvider.default_format_options()
    if options:
        merged.update(options)
    resolved_locale = locale or ConfigProvider.get_config().DEFAULT_LOCALE
    return (formatter or BabelLocaleFormatter()).format(instant, merged, resolved_locale)
