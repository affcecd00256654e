"""This module contains shared fixtures for all unit tests."""

import os

import pytest


@pytest.fixture(scope="session", autouse=True)
def unset_date_utils_settings() -> None:
    """Unsets library settings from the environment for the test session.

    This fixture ensures that unit tests always see the built-in defaults,
    whatever locale or log level the developer has exported locally.
    """
    os.environ.pop("DEFAULT_LOCALE", None)
    os.environ.pop("LOG_LEVEL", None)
