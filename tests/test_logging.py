import logging

import pytest
from colorlog import ColoredFormatter

from src.utils.logging import ECIDFilter, ecid_var, setup_logging


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    root.handlers = [h for h in saved_handlers if not isinstance(h.formatter, ColoredFormatter)]
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def _colored_handlers(root):
    return [h for h in root.handlers if isinstance(h.formatter, ColoredFormatter)]


def test_setup_logging_is_idempotent(clean_root):
    logger = setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG)

    assert logger.name == "EmailComposer"
    assert logger.level == logging.DEBUG
    assert len(_colored_handlers(clean_root)) == 1


def test_setup_logging_reads_level_from_env(clean_root, monkeypatch):
    monkeypatch.setenv("EMAIL_COMPOSER_LOG_LEVEL", "WARNING")
    assert setup_logging().level == logging.WARNING


def test_ecid_filter_stamps_record():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    token = ecid_var.set("req-42")
    try:
        assert ECIDFilter().filter(record) is True
    finally:
        ecid_var.reset(token)
    assert record.ecid == "req-42"
