"""Tests for logging configuration."""

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest
import structlog

from prediction_guard.config import Settings
from prediction_guard.log_config import configure_logging


@pytest.fixture(autouse=True)
def reset_root_handlers():
    yield
    for handler in logging.root.handlers:
        handler.close()
    logging.root.handlers.clear()


@pytest.fixture
def make_settings():
    def _make(**logging_fields) -> Settings:
        return Settings(
            api_key="test-api-key",
            url="https://api.test.local",
            _env_file=None,
            **logging_fields,
        )

    return _make


def _json_lines(path):
    for handler in logging.root.handlers:
        handler.flush()
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_console_only_when_no_log_file(make_settings):
    configure_logging(make_settings(log_level="DEBUG"))

    assert len(logging.root.handlers) == 1
    console = logging.root.handlers[0]
    assert not isinstance(console, RotatingFileHandler)
    assert isinstance(console.formatter, structlog.stdlib.ProcessorFormatter)
    assert logging.root.level == logging.DEBUG


def test_file_handler_uses_rotation_settings(make_settings, tmp_path):
    log_file = tmp_path / "client.log"

    configure_logging(make_settings(
        log_level="WARNING",
        log_file=str(log_file),
        log_file_max_bytes=5_000_000,
        log_file_backup_count=3,
    ))

    file_handlers = [h for h in logging.root.handlers if isinstance(h, RotatingFileHandler)]
    assert len(logging.root.handlers) == 2
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 5_000_000
    assert file_handlers[0].backupCount == 3
    assert logging.root.level == logging.WARNING
    assert log_file.exists()


def test_log_file_directory_created(make_settings, tmp_path):
    log_file = tmp_path / "logs" / "nested" / "client.log"

    configure_logging(make_settings(log_file=str(log_file)))

    assert log_file.exists()


def test_reconfiguring_replaces_handlers(make_settings, tmp_path):
    configure_logging(make_settings(log_file=str(tmp_path / "a.log")))
    configure_logging(make_settings())

    assert len(logging.root.handlers) == 1


def test_unknown_level_falls_back_to_info(make_settings):
    configure_logging(make_settings(log_level="chatty"))

    assert logging.root.level == logging.INFO


def test_httpx_quiet_unless_debug(make_settings):
    configure_logging(make_settings(log_level="INFO"))
    assert logging.getLogger("httpx").level == logging.WARNING

    configure_logging(make_settings(log_level="DEBUG"))
    assert logging.getLogger("httpcore").level == logging.DEBUG


def test_structlog_events_written_as_json(make_settings, tmp_path):
    log_file = tmp_path / "client.log"
    configure_logging(make_settings(log_file=str(log_file)))

    structlog.get_logger("prediction_guard.client").info(
        "pg_request_start", method="POST", path="/chat/completions"
    )

    records = _json_lines(log_file)
    assert records[-1]["event"] == "pg_request_start"
    assert records[-1]["path"] == "/chat/completions"
    assert records[-1]["level"] == "info"
    assert "timestamp" in records[-1]


def test_stdlib_records_written_as_json(make_settings, tmp_path):
    log_file = tmp_path / "client.log"
    configure_logging(make_settings(log_file=str(log_file)))

    logging.getLogger("httpx").warning("connection pool full")

    records = _json_lines(log_file)
    assert records[-1]["event"] == "connection pool full"
    assert records[-1]["logger"] == "httpx"
    assert records[-1]["level"] == "warning"
