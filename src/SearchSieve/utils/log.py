"""SearchSieve logging utilities.

Provides a simple logger with a timestamp + abbreviated level prefix, and
centralizes logger initialization.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final


_LEVEL_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}


class _AbbrevLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        """Format one log record with an abbreviated level.

        Args:
            record: Logging record.

        Returns:
            Formatted message string.
        """
        record.levelabbr = _LEVEL_ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


log = logging.getLogger("SearchSieve")


def command_log_path(log_dir: str, command_name: str, *, now: datetime | None = None) -> Path:
    """Return the log file path for one CLI command run.

    Each command gets its own directory, e.g. ``log/extract/extract_1019143000.log``.

    Args:
        log_dir: Base directory for log files.
        command_name: CLI command name (``extract``, ``params``, ``predicates``).
        now: Timestamp to embed; defaults to the current time.

    Returns:
        Path of the log file; the parent directory is not created.
    """
    timestamp = (now or datetime.now()).strftime("%m%d%H%M%S")
    return Path(log_dir or "log") / command_name / f"{command_name}_{timestamp}.log"


def configure_logging(
    *,
    level: str = "INFO",
    command_name: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> None:
    """Configure SearchSieve logger.

    Uses format: mm-dd HH:MM:SS [<LVL>] <message>
    where LVL is one of: DEBG/INFO/WARN/ERRO.

    Console output goes to stderr at the configured level, so extracted
    conditions printed on stdout stay parseable. The file mirror, when
    enabled, always records DEBUG so skipped search keys can be traced.

    Args:
        level: Logging level (e.g., INFO, DEBUG).
        command_name: CLI command whose run is logged; names the log file.
        log_to_file: Whether to mirror logs to a file.
        log_dir: Base directory for log files.
    """
    resolved_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    formatter = _AbbrevLevelFormatter(
        fmt="%(asctime)s [%(levelabbr)s] %(message)s",
        datefmt="%m-%d %H:%M:%S",
    )

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(resolved_level)
    stream_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [stream_handler]

    if log_to_file and command_name:
        log_path = command_log_path(log_dir, command_name)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    log.handlers.clear()
    for handler in handlers:
        log.addHandler(handler)
    log.setLevel(min(logging.DEBUG, resolved_level))
    log.propagate = False
