# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""utils.py

Logging setup for programs that want to see what the parser is doing.

Argumentative never configures logging on import. `setup_logging()` only touches
the `argumentative` logger, so handlers installed on the root logger by the
application are left alone.
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from argumentative.logger import logger

LOG_MODE_ENV = "ARGUMENTATIVE_LOG_MODE"
LOG_MODES = ("cli", "json")
JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s"
PLAIN_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_formatter(as_json: bool) -> logging.Formatter:
    if as_json:
        return pythonjsonlogger.json.JsonFormatter(JSON_FIELDS)
    return logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT)


def _build_console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format=f"[{DATE_FORMAT}]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(_build_formatter(as_json=True))
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
    propagate: bool = False,
) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the `argumentative` logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        mode (str | None): "cli" for Rich console output or "json" for one JSON
            object per line. Falls back to `ARGUMENTATIVE_LOG_MODE`, then "cli".
        log_filename (str | None): Also append records to this file.
        json_log_to_file (bool): Write file records as JSON instead of plain text.
        file_log_level (int): Threshold for the file handler.
        console_log_level (int): Threshold for the console handler.
        propagate (bool): Pass records on to the application's root handlers too.

    Returns:
        logging.Logger: The configured `argumentative` logger.

    Raises:
        ValueError: If `mode` is not one of "cli" or "json". The logger is left
            untouched in that case.
    """
    mode = (mode or os.getenv(LOG_MODE_ENV) or "cli").strip().lower()
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = _build_console_handler(mode)
    console_handler.setLevel(console_log_level)
    logger.addHandler(console_handler)
    level = console_log_level

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        file_handler.setFormatter(_build_formatter(json_log_to_file))
        logger.addHandler(file_handler)
        level = min(level, file_log_level)

    logger.setLevel(level)
    logger.propagate = propagate
    logger.debug("Logging initialized in '%s' mode.", mode)
    return logger
