"""
Logging configuration using Loguru.

kcgraph runs inside a host process that may own Loguru sinks of its own.
setup_logging therefore only replaces the sinks it added itself (and
Loguru's default stderr sink); every other sink is left in place. The
sinks installed here only take records from get_logger loggers.
"""

import sys
from pathlib import Path

from loguru import logger

from kcgraph.config import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]} - {message}"
LOG_FILE_NAME = "kcgraph_{time:YYYY-MM-DD}.log"

# Loguru's preinstalled stderr sink
_DEFAULT_HANDLER_ID = 0

_handler_ids: list[int] = []


def _remove_handler(handler_id: int) -> None:
    try:
        logger.remove(handler_id)
    except ValueError:
        # Already removed by someone else
        pass


def setup_logging(
    level: str = "INFO",
    log_to_file: bool = False,
    log_dir: str = "logs",
    file_rotation: str = "10 MB",
    file_retention: str = "7 days",
    compression: str = "zip",
    serialize: bool = True,
) -> list[int]:
    """
    Configure kcgraph's console sink and optional rotating file sink.

    Calling it again replaces the sinks of the previous call.

    Args:
        level: Minimum level of both sinks
        log_to_file: Also write to a rotating file under log_dir
        log_dir: Directory of the log files (created if missing)
        file_rotation: Loguru rotation condition
        file_retention: Loguru retention condition
        compression: Format of rotated files
        serialize: Write file records as JSON

    Returns:
        Loguru handler IDs of the installed sinks
    """
    if not _handler_ids:
        _remove_handler(_DEFAULT_HANDLER_ID)
    while _handler_ids:
        _remove_handler(_handler_ids.pop())

    _handler_ids.append(
        logger.add(
            sys.stderr,
            level=level,
            format=CONSOLE_FORMAT,
            filter=lambda record: "module" in record["extra"],
            colorize=True,
        )
    )

    if log_to_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        _handler_ids.append(
            logger.add(
                log_path / LOG_FILE_NAME,
                level=level,
                format=FILE_FORMAT,
                filter=lambda record: "module" in record["extra"],
                rotation=file_rotation,
                retention=file_retention,
                compression=compression,
                serialize=serialize,
                enqueue=True,
            )
        )

    return list(_handler_ids)


def configure_logging(config: LoggingConfig) -> list[int]:
    """Apply the logging section of a kcgraph Config."""
    return setup_logging(**config.model_dump())


def get_logger(name: str):
    """Get a logger instance for a module."""
    return logger.bind(module=name)
