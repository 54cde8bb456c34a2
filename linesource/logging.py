"""Logging configuration using loguru."""

import sys
from pathlib import Path

from loguru import logger


def setup_logger(
    log_level: str = "INFO",
    log_to_file: bool = False,
    log_dir: Path = Path("logs"),
) -> None:
    """Configure the loguru logger with a stderr sink and an optional file sink.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_to_file: Whether to also write logs to ``log_dir/linesource.log``.
        log_dir: Directory for log files.
    """
    logger.remove()

    # stderr keeps stdout free for the printed lines
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True,
    )

    if log_to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "linesource.log",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            level=log_level,
            rotation="10 MB",
            retention="30 days",
        )
