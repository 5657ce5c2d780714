"""Unit tests for logger_config.py."""

import logging
from datetime import datetime

import pytest

from logger_config import log_file_for, setup_logger


@pytest.fixture
def fresh_logger_name(request):
    name = f"employee_ui.test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for h in logger.handlers:
        h.close()
    logger.handlers.clear()


def test_log_file_name(tmp_path):
    assert log_file_for(tmp_path, datetime(2025, 1, 15, 9, 30)) == tmp_path / "employee_ui_2025-01-15.log"


def test_file_and_console_handlers(tmp_path, fresh_logger_name):
    logger = setup_logger(fresh_logger_name, logs_path=tmp_path / "logs")
    kinds = {type(h) for h in logger.handlers}
    assert kinds == {logging.FileHandler, logging.StreamHandler}
    assert log_file_for(tmp_path / "logs").exists()


def test_messages_reach_file(tmp_path, fresh_logger_name):
    logger = setup_logger(fresh_logger_name, logs_path=tmp_path, level="DEBUG")
    logger.debug("GET /getEmployees")
    for h in logger.handlers:
        h.flush()
    line = log_file_for(tmp_path).read_text(encoding="utf-8").strip()
    assert line.endswith(f"| DEBUG   | {fresh_logger_name} | GET /getEmployees")


def test_explicit_level(tmp_path, fresh_logger_name):
    assert setup_logger(fresh_logger_name, logs_path=tmp_path, level="WARNING").level == logging.WARNING


def test_handlers_not_duplicated(tmp_path, fresh_logger_name):
    first = setup_logger(fresh_logger_name, logs_path=tmp_path)
    count = len(first.handlers)
    second = setup_logger(fresh_logger_name, logs_path=tmp_path)
    assert second is first
    assert len(second.handlers) == count


def test_unwritable_logs_path_falls_back_to_console(tmp_path, fresh_logger_name):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")
    logger = setup_logger(fresh_logger_name, logs_path=blocker / "logs")
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
