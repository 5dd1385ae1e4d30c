"""Shared fixtures: a quiet logger so test output stays readable."""

import io
import logging

import pytest

from headerecho.config import AppConfig
from headerecho.logger import configure_logger
from headerecho.sample import create_app


@pytest.fixture
def log_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(log_stream: io.StringIO) -> logging.Logger:
    """Process logger at TRACE, writing into ``log_stream``."""
    return configure_logger(AppConfig(logger_name="headerecho.tests"), stream=log_stream)


@pytest.fixture
def full_app(logger: logging.Logger):
    return create_app("full", config=AppConfig(), logger=logger)


@pytest.fixture
def simple_app(logger: logging.Logger):
    return create_app("simple", config=AppConfig(), logger=logger)
