"""Tests for logging_setup.py."""

from __future__ import annotations

import logging

import pytest

from cab_fare.logging_setup import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_text_format(restore_root_logger):
    setup_logging("debug")
    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert "%(levelname)s" in root.handlers[0].formatter._fmt


def test_json_format(restore_root_logger):
    setup_logging("WARNING", json_output=True)
    root = restore_root_logger
    assert root.level == logging.WARNING
    assert '"service_name": "cab-fare"' in root.handlers[0].formatter._fmt
