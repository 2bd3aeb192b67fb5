"""Test configuration and fixtures for the entire test suite."""

import logging

import pytest
from dotenv import load_dotenv


@pytest.fixture(scope="session", autouse=True)
def load_environment() -> None:
    """Load EXCHANGE_* overrides from a local .env file, if any."""
    load_dotenv()


@pytest.fixture(autouse=True)
def exchange_debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    """Capture exchange log output at DEBUG for failing test reports."""
    caplog.set_level(logging.DEBUG, logger="src.exchange")
