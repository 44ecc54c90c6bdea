"""Structured logging for playwith."""

import logging
import os
import sys
import time
from typing import Optional

from .errors import describe_error


def setup_logger(
    name: str = "playwith",
    level: Optional[int] = None
) -> logging.Logger:
    """
    Configure logging for a playwith module.

    Args:
        name: Logger name (usually __name__ from calling module)
        level: Logging level (defaults to INFO, or LOG_LEVEL from the environment)

    Returns:
        Configured logger instance
    """
    if level is None:
        log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
        level = getattr(logging, log_level_name, logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers if logger already configured
    if logger.handlers:
        return logger

    # stdout carries the JSON result, so diagnostics go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    # Format: [2025-01-01 12:30:45] [INFO] [module] Message
    formatter = logging.Formatter(
        '[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logger.propagate = False

    return logger


class StageTimer:
    """
    Log the start and outcome of one stage of a run, with its duration.

    Example:
        with StageTimer(logger, "Finding games shared by 3 profiles"):
            ...
        # Finding games shared by 3 profiles...
        # Finding games shared by 3 profiles: done in 1.42s
    """

    def __init__(self, logger: logging.Logger, stage: str):
        self.logger = logger
        self.stage = stage
        self.started: float | None = None
        self.elapsed: float | None = None

    def __enter__(self):
        self.started = time.monotonic()
        self.logger.info(f"{self.stage}...")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.monotonic() - self.started

        if exc_type is None:
            self.logger.info(f"{self.stage}: done in {self.elapsed:.2f}s")
        else:
            self.logger.error(f"{self.stage}: aborted after {self.elapsed:.2f}s: {describe_error(exc_val)}")

        return False


def log_skipped_item(logger: logging.Logger, kind: str, item: str, error: Exception):
    """Warn that one item was left out of the result, with the full cause chain."""
    logger.warning(f"Skipping {kind} for {item}: {describe_error(error)}")
