"""
Tests for the logging system
"""

import logging
import os
import time
from logging.handlers import RotatingFileHandler

import pytest
from rich.logging import RichHandler
from sm_menu.logger import SmMenuLogger


@pytest.fixture
def fresh_logger(tmp_path):
    saved = (SmMenuLogger._instance, SmMenuLogger._initialized)
    SmMenuLogger._instance = None
    SmMenuLogger._initialized = False
    yield SmMenuLogger(logs_dir=tmp_path / "logs")
    SmMenuLogger._instance, SmMenuLogger._initialized = saved


def test_singleton(fresh_logger):
    assert SmMenuLogger() is fresh_logger


def test_handlers(fresh_logger):
    handlers = fresh_logger.logger.handlers
    file_handlers = [h for h in handlers if isinstance(h, RotatingFileHandler)]
    console_handlers = [h for h in handlers if isinstance(h, RichHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 10 * 1024 * 1024
    assert file_handlers[0].backupCount == 5
    assert console_handlers[0].level == logging.WARNING


def test_child_logger_name(fresh_logger):
    assert fresh_logger.get_logger("cli").name == "sm_menu.cli"
    assert fresh_logger.get_logger() is fresh_logger.logger


def test_messages_reach_file(fresh_logger):
    fresh_logger.info("menu opened")
    for handler in fresh_logger.logger.handlers:
        handler.flush()
    logs = list(fresh_logger.logs_dir.glob("sm_menu_*.log"))
    assert logs and "menu opened" in logs[0].read_text()


def test_clear_old_logs(fresh_logger):
    old = fresh_logger.logs_dir / "sm_menu_20000101.log"
    old.write_text("old")
    stale = time.time() - 30 * 86400
    os.utime(old, (stale, stale))
    fresh_logger.clear_old_logs(days=7)
    assert not old.exists()


def test_unwritable_directory_skips_file_handler(tmp_path):
    saved = (SmMenuLogger._instance, SmMenuLogger._initialized)
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    SmMenuLogger._instance = None
    SmMenuLogger._initialized = False
    try:
        instance = SmMenuLogger(logs_dir=blocker / "logs")
        assert not any(isinstance(h, RotatingFileHandler) for h in instance.logger.handlers)
    finally:
        SmMenuLogger._instance, SmMenuLogger._initialized = saved
