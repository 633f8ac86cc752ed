"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from paytrack.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_under_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should create the dated file in the logs subdir."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240501"),
    )

    builder = logger_module.LoggerBuilder()
    built = (
        builder.name("paytrack.test.builder")
        .subdir("usage")
        .prefix("usage_logs")
        .console(False)
        .level(logging.WARNING)
        .build()
    )

    assert built.level == logging.WARNING
    assert built.propagate is False
    file_handlers = [
        handler
        for handler in built.handlers
        if isinstance(handler, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    expected = tmp_path / "logs" / "usage" / "20240501_usage_logs.log"
    assert file_handlers[0].baseFilename == str(expected)
    assert not any(
        type(handler) is logging.StreamHandler for handler in built.handlers
    )
    # Building again should not stack handlers.
    assert builder.build() is built
    assert len(built.handlers) == 1

    for handler in list(built.handlers):
        handler.close()
        built.removeHandler(handler)


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter at INFO."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "finance.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """Each logger family should build once and delegate its calls."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()
    app_logger.warning("low balance")

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    fake_logger.warning.assert_called_once_with("low balance")
