"""This module contains the unit tests for format_to_string."""

from collections.abc import Generator
from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest
from date_utils.exceptions.date_utils import FormatOptionError
from date_utils.services.arithmetic import add_days, add_months, set_day, subtract_days
from date_utils.services.formatting import format_to_string


@pytest.fixture
def mock_config() -> Generator[MagicMock, None, None]:
    """Fixture for a mocked ConfigProvider."""
    with patch("date_utils.services.formatting.ConfigProvider") as mock_provider:
        mock_config_instance = MagicMock()
        mock_config_instance.DEFAULT_LOCALE = "pt-br"
        mock_provider.get_config.return_value = mock_config_instance
        yield mock_config_instance


@pytest.mark.parametrize(
    "value, options, expected",
    [
        ("1999-03-30 00:01:46", None, "30/03/1999"),
        ("1999-03-30 01:06:00", {"month": "long"}, "30 de março de 1999"),
        ("1999-03-30 15:06:00", {"month": "long", "weekday": "long"}, "terça-feira, 30 de março de 1999"),
    ],
)
def test_format_to_string(mock_config: MagicMock, value: str, options: dict[str, str] | None, expected: str) -> None:
    """Tests rendering with the default locale."""
    assert format_to_string(value, options) == expected


@pytest.mark.parametrize(
    "instant, options, expected",
    [
        (
            set_day("1999-03-22 15:06:00", 29),
            {"month": "long", "weekday": "long"},
            "segunda-feira, 29 de março de 1999",
        ),
        (add_days("1999-03-22 15:06:00", 22), None, "13/04/1999"),
        (add_days("1999-03-22 15:06:00", 30), None, "21/04/1999"),
        (add_days("1999-03-22 15:06:00", 90), None, "20/06/1999"),
        (subtract_days("1999-03-22 15:06:00", 90), None, "22/12/1998"),
        (add_months("1999-01-22 15:06:00", 2), None, "22/03/1999"),
        (add_months("1999-03-22 15:06:00", 8), None, "22/11/1999"),
    ],
)
def test_format_after_arithmetic(
    mock_config: MagicMock, instant: datetime, options: dict[str, str] | None, expected: str
) -> None:
    """Tests rendering the result of arithmetic operations."""
    assert format_to_string(instant, options, "pt-br") == expected


def test_locale_defaults_to_configuration(mock_config: MagicMock) -> None:
    """Tests that the configured locale is used when none is given."""
    mock_config.DEFAULT_LOCALE = "en-US"
    assert format_to_string(datetime(1999, 3, 30), {"month": "long"}) == "March 30, 1999"


def test_explicit_locale_wins(mock_config: MagicMock) -> None:
    """Tests that an explicit locale overrides the configuration."""
    mock_config.DEFAULT_LOCALE = "en-US"
    assert format_to_string(datetime(1999, 3, 30), locale="pt-br") == "30/03/1999"


def test_options_are_merged_over_defaults(mock_config: MagicMock) -> None:
    """Tests that the formatter receives defaults overridden field by field."""
    formatter = MagicMock()
    formatter.format.return_value = "rendered"

    result = format_to_string("1999-03-30", {"month": "long", "weekday": "long"}, "pt-br", formatter=formatter)

    assert result == "rendered"
    formatter.format.assert_called_once_with(
        datetime(1999, 3, 30),
        {"day": "numeric", "month": "long", "year": "numeric", "weekday": "long"},
        "pt-br",
    )


def test_options_are_not_mutated(mock_config: MagicMock) -> None:
    """Tests that the caller's options mapping is left untouched."""
    options = {"month": "long"}
    format_to_string("1999-03-30", options)
    assert options == {"month": "long"}


def test_invalid_options_propagate_from_formatter(mock_config: MagicMock) -> None:
    """Tests that option errors come from the formatting layer."""
    with pytest.raises(FormatOptionError):
        format_to_string("1999-03-30", {"month": "enormous"})
