"""
Logging setup for the refinance CLI.

The calculators log through ``loguru.logger`` directly and never configure
sinks. The CLI calls setup_logging() once per invocation with the validated
``logging`` config section.
"""

import os
import sys

from loguru import logger

from refinance.core.config_schema import LoggingConfig

CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"


def resolve_log_file(file: str, log_dir: str | None = None) -> str | None:
    """Return the log file path, or None when file logging is off.

    Relative names are placed under ``log_dir`` when one is given.
    """
    if not file:
        return None
    path = os.path.expanduser(file)
    if log_dir and not os.path.isabs(path):
        path = os.path.join(log_dir, path)
    return path


def setup_logging(settings: LoggingConfig, log_dir: str | None = None) -> str | None:
    """
    Replace loguru's sinks with stderr and, if configured, a rotating file.

    Args:
        settings: The validated ``logging`` section.
        log_dir: Directory for a relative ``settings.file``.

    Returns:
        The log file path in use, or None for stderr only.
    """
    logger.remove()
    logger.add(sys.stderr, level=settings.level, format=CONSOLE_FORMAT)

    log_file = resolve_log_file(settings.file, log_dir)
    if log_file:
        logger.add(
            log_file,
            level=settings.level,
            format=FILE_FORMAT,
            rotation=settings.rotation,
            retention=settings.retention,
        )
        logger.debug(f"Logging to {log_file}")
    return log_file
