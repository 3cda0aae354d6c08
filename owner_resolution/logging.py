"""Logging helpers for the owner resolution engine."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {extra} - {message}"


def env_log_level(default: str = "INFO") -> str:
    """Return log level string from LOG_LEVEL env (fallback to ``default``)."""
    return os.getenv("LOG_LEVEL", default).upper()


def bind_context(**kwargs: Any):
    """Return a logger with bound contextual fields (mention/segment/key)."""
    return logger.bind(**{k: v for k, v in kwargs.items() if v is not None})


def configure_logger(level: str | None = None, log_file: str | Path | None = None) -> None:
    """
    Configure loguru sinks for command-line runs.

    The library itself never touches sinks; only entry points call this.
    """
    level = (level or env_log_level()).upper()

    # Remove default handler to avoid duplicate logs
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            rotation="10 MB",
            retention="10 days",
            level=level,
            format=FILE_FORMAT,
            backtrace=True,
            diagnose=True,
        )

    if os.getenv("LOG_JSON", "0").lower() in {"1", "true", "yes", "on"}:
        os.makedirs("logs", exist_ok=True)
        logger.add(
            "logs/owner_resolution_{time}.jsonl",
            level="DEBUG",
            serialize=True,
            backtrace=True,
            diagnose=True,
            enqueue=False,
        )
