"""
Loguru-based logging configuration and structured event sink
"""
import sys
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from loguru import logger


def setup_logger(
    log_level: str = "INFO", log_file: str = None, serialize: bool = False
) -> None:
    """
    Configure loguru logger with consistent formatting

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging to file
        serialize: Emit JSON lines (bound tags and fields included) instead of text
    """
    # Remove default handler
    logger.remove()

    # Console handler with colors
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>",
        level=log_level,
        colorize=not serialize,
        serialize=serialize,
    )

    # File handler if specified
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
            level=log_level,
            rotation="100 MB",
            retention="30 days",
            compression="zip",
            serialize=serialize,
            enqueue=True,  # Thread-safe
        )

    logger.debug(f"Logger initialized with level: {log_level}")


def log_event(tags: Iterable[str], fields: Optional[Mapping[str, Any]] = None) -> None:
    """
    Emit one structured event

    Tags and fields are bound into ``record["extra"]``; the message is a flat
    ``[tag] key=value`` rendering for the console. An ``error`` field raises
    the level to ERROR.
    """
    tags = list(tags)
    fields = dict(fields or {})
    level = "ERROR" if fields.get("error") else "INFO"
    rendered = " ".join(f"{k}={v}" for k, v in fields.items() if v is not None)
    logger.bind(tags=tags, **fields).log(level, f"[{','.join(tags)}] {rendered}")
