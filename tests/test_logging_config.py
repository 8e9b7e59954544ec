"""Tests for core/logging_config.py."""
import logging
import sys

import pytest

from core.logging_config import setup_logging


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    root.handlers = []
    yield root
    for h in root.handlers:
        if isinstance(h, logging.FileHandler):
            h.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


class TestSetupLogging:
    def test_nothing_writes_to_stdout(self, clean_root_logger, tmp_path):
        setup_logging(tmp_path)
        assert clean_root_logger.handlers
        for h in clean_root_logger.handlers:
            assert getattr(h, "stream", None) is not sys.stdout

    def test_console_handler_uses_stderr(self, clean_root_logger, tmp_path):
        setup_logging(tmp_path)
        streams = [h.stream for h in clean_root_logger.handlers if type(h) is logging.StreamHandler]
        assert streams == [sys.stderr]

    def test_writes_timestamped_file(self, clean_root_logger, tmp_path):
        setup_logging(tmp_path, "server.log")
        logging.getLogger("tests").info("hello")
        for h in clean_root_logger.handlers:
            h.flush()
        files = list(tmp_path.glob("server_*.log"))
        assert len(files) == 1
        assert "hello" in files[0].read_text(encoding="utf-8")

    def test_idempotent(self, clean_root_logger, tmp_path):
        setup_logging(tmp_path)
        count = len(clean_root_logger.handlers)
        setup_logging(tmp_path)
        assert len(clean_root_logger.handlers) == count
        assert clean_root_logger.level == logging.INFO
