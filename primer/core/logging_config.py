"""
Primer Logging Configuration

Everything logs under the "primer" namespace. Records go to stderr so a
demo's stdout can be captured or piped without log lines mixed in.
"""

import functools
import logging
import sys
import time
from enum import Enum
from pathlib import Path
from typing import Optional


class LogLevel(Enum):
    """Log level enumeration."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
VERBOSE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(threadName)s | %(message)s"

ROOT_LOGGER_NAME = "primer"

# Chatty library loggers held at WARNING unless debugging
NOISY_LOGGERS = ("uvicorn.access", "slowapi", "asyncio")

_initialized = False


def level_for_flags(debug: bool = False, quiet: bool = False) -> LogLevel:
    """Map the CLI's --debug / --quiet flags to a level. --debug wins."""
    if debug:
        return LogLevel.DEBUG
    if quiet:
        return LogLevel.ERROR
    return LogLevel.WARNING


def setup_logging(
    level: LogLevel = LogLevel.WARNING,
    log_file: Optional[Path] = None,
    verbose: bool = False,
    console_output: bool = True
) -> None:
    """
    Configure the primer logger. Safe to call again; handlers are replaced.

    Args:
        level: Minimum level for primer loggers
        log_file: Also append records to this file, creating its directory
        verbose: Include line numbers and thread names (useful for the threaded demos)
        console_output: Write records to stderr
    """
    global _initialized

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level.value)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        VERBOSE_FORMAT if verbose else DEFAULT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers = []
    if console_output:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level.value)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    library_level = logging.DEBUG if level is LogLevel.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)

    _initialized = True
    root_logger.debug(f"Logging initialized - Level: {level.name}, File: {log_file}")


def get_logger(name: str) -> logging.Logger:
    """Return ``primer.<name>``, configuring defaults on first use."""
    if not _initialized:
        setup_logging()

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log_function_call(logger: logging.Logger):
    """Decorator logging entry, exit with elapsed time, and failures."""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger.debug(f"Entering {func.__name__}")
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"Error in {func.__name__}: {e}")
                raise
            logger.debug(f"Exiting {func.__name__} after {time.perf_counter() - started:.3f}s")
            return result
        return wrapper
    return decorator
