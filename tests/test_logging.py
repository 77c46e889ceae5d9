"""Tests for structlog logging configuration."""

import json
import logging
import os
import sys

import pytest
import structlog

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gf_shamir.logging import configure_logging


def test_default_level_is_warning(monkeypatch):
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    configure_logging()
    assert logging.getLogger().level == logging.WARNING


def test_level_from_env(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'info')
    configure_logging()
    assert logging.getLogger().level == logging.INFO


def test_explicit_level_beats_env(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'ERROR')
    configure_logging('DEBUG')
    assert logging.getLogger().level == logging.DEBUG


def test_invalid_level(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'LOUD')
    with pytest.raises(ValueError):
        configure_logging()


def test_single_stderr_handler():
    configure_logging()
    configure_logging()
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_json_format(monkeypatch, capsys):
    monkeypatch.setenv('LOG_FORMAT', 'json')
    configure_logging('INFO')
    structlog.get_logger().info('shares_written', count=5)
    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record['event'] == 'shares_written'
    assert record['count'] == 5
    assert record['level'] == 'info'
