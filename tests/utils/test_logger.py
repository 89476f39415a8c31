from __future__ import annotations

import logging

from src.utils.logger import ROOT_LOGGER_NAME, ConditionalFormatter, get_logger, setup_logging


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger("src.engine.builder").name == f"{ROOT_LOGGER_NAME}.src.engine.builder"
    assert get_logger(f"{ROOT_LOGGER_NAME}.cli").name == f"{ROOT_LOGGER_NAME}.cli"


def test_setup_logging_is_idempotent() -> None:
    first = setup_logging("DEBUG")
    second = setup_logging("WARNING")
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.WARNING


def test_conditional_formatter_adds_location_for_warnings() -> None:
    formatter = ConditionalFormatter()
    warning = logging.LogRecord("dice_trace.test", logging.WARNING, "builder.py", 42, "dropped", None, None)
    info = logging.LogRecord("dice_trace.test", logging.INFO, "builder.py", 42, "built", None, None)
    assert ":42]" in formatter.format(warning)
    assert ":42]" not in formatter.format(info)
