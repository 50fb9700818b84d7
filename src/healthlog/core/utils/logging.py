"""
Logging configuration using loguru.

Library modules log through ``from loguru import logger`` and never
configure sinks themselves; the CLI calls ``setup_logging`` once at startup.
Console output stays terse so ``healthlog check`` JSON on stdout is easy
to pipe, while the optional file sink keeps a timestamped history.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"
LOG_FILE_NAME = "healthlog.log"


def setup_logging(
    level: str = "WARNING",
    log_file: str | Path | None = None,
    verbose: bool = False,
    rotation: str = "1 MB",
    retention: str = "30 days",
) -> None:
    """
    Configure loguru with a stderr sink and an optional rotating file sink.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Log file path. A directory, or a path with no suffix,
            gets ``healthlog.log`` appended and is created if missing.
        verbose: Lower the console level to INFO (``--verbose``).
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.
    """
    console_level = "INFO" if verbose and level in ("WARNING", "ERROR", "CRITICAL") else level

    logger.remove()
    logger.add(sys.stderr, level=console_level, format=CONSOLE_FORMAT)

    if log_file:
        path = Path(log_file).expanduser()
        if path.is_dir() or not path.suffix:
            path.mkdir(parents=True, exist_ok=True)
            path = path / LOG_FILE_NAME
        logger.add(str(path), level=level, format=FILE_FORMAT, rotation=rotation, retention=retention)
