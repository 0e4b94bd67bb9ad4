"""
Logging setup for the command-line entry point.
"""

__all__ = ["setup_logging"]

import logging
from pathlib import Path

from rc4kit.infra.paths import PACKAGE_NAME

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
LOG_FILENAME = f"{PACKAGE_NAME}.log"


def setup_logging(
    level: str = "INFO",
    log_dir: Path | None = None,
) -> logging.Logger:
    """Configure the package logger.

    Existing handlers on the package logger are replaced, so calling this
    more than once does not duplicate output.

    Args:
        level: Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).
        log_dir: Optional directory for a log file. Created if missing.

    Returns:
        The configured package logger.

    Raises:
        ValueError: If ``level`` is not a known logging level.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(PACKAGE_NAME)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILENAME, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger
