"""Ensure logging setup attaches a handler and applies the configured level."""

import logging

import pytest

from objstore.core.logging import setup_logging


@pytest.fixture
def bare_root(monkeypatch):
    """Root logger with no handlers, restored after the test."""
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(root, "handlers", [])
    yield root
    root.setLevel(level)


def test_setup_logging(bare_root):
    setup_logging()

    assert bare_root.handlers
    assert bare_root.level == logging.INFO


def test_setup_logging_accepts_explicit_level(bare_root):
    setup_logging("debug")

    assert bare_root.level == logging.DEBUG


def test_setup_logging_reads_level_from_environment(bare_root, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")

    setup_logging()

    assert bare_root.level == logging.WARNING


def test_setup_logging_reads_level_from_dotenv(bare_root, monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("LOG_LEVEL=DEBUG\n")
    monkeypatch.chdir(tmp_path)

    setup_logging()

    assert bare_root.level == logging.DEBUG
