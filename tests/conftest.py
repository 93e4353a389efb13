"""
Shared test configuration.

Every test starts with an empty metadata cache and default configuration.
"""

import logging

import pytest

from enumkit import reset_all, reset_config


@pytest.fixture(autouse=True)
def clean_enum_state():
    """Reset registry, config and logger state around each test."""
    reset_all()
    reset_config()
    yield
    reset_all()
    reset_config()

    enum_logger = logging.getLogger("enumkit")
    enum_logger.handlers.clear()
    enum_logger.setLevel(logging.NOTSET)
    enum_logger.propagate = True
