"""Unit tests for logging and observability settings."""

import logging

import pytest

from board.config import ObservabilitySettings, Settings
from board.util.logging import log_level_for
from board.util.observability import should_send_to_logfire


@pytest.mark.parametrize(
    ("token", "explicit", "expected"),
    [
        (None, None, False),
        ("tok", None, True),
        ("tok", False, False),
        (None, True, True),
    ],
)
def test_should_send_to_logfire(token, explicit, expected):
    settings = Settings(
        observability=ObservabilitySettings(
            logfire_token=token, send_to_logfire=explicit
        )
    )

    assert should_send_to_logfire(settings) is expected


@pytest.mark.parametrize(
    ("environment", "debug", "level"),
    [
        ("development", False, logging.INFO),
        ("production", False, logging.WARNING),
        ("production", True, logging.DEBUG),
        ("test", False, logging.INFO),
    ],
)
def test_log_level_for(environment, debug, level):
    assert log_level_for(Settings(environment=environment, debug=debug)) == level
