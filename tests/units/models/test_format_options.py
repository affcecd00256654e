"""Unit tests for the FormatOptions model."""

import pytest
from date_utils.models.format_options import FormatOptions
from pydantic import ValidationError


def test_defaults() -> None:
    """Tests the default field verbosity."""
    options = FormatOptions()
    assert (options.day, options.month, options.year) == ("numeric", "2-digit", "numeric")
    assert options.weekday is None
    assert options.has_time is False


def test_has_time_when_any_time_field_is_set() -> None:
    """Tests that a single time field switches time rendering on."""
    assert FormatOptions(minute="2-digit").has_time is True


@pytest.mark.parametrize(
    "raw",
    [
        {"month": "huge"},
        {"weekday": "numeric"},
        {"day": "long"},
        {"timeZoneName": "short"},
    ],
)
def test_rejects_unknown_keys_and_values(raw: dict[str, str]) -> None:
    """Tests that unknown keys and values fail validation."""
    with pytest.raises(ValidationError):
        FormatOptions.model_validate(raw)


def test_is_frozen() -> None:
    """Tests that options cannot be changed after creation."""
    options = FormatOptions()
    with pytest.raises(ValidationError):
        options.month = "long"  # type: ignore[misc]
