"""
Logging configuration for kitmgr.

``configure_from_cli`` is called once by main.py with the global flags.
Every module logs through ``logging.getLogger(__name__)``.

Level precedence:
    --debug / --verbose / --quiet  >  KITMGR_LOG_LEVEL  >  WARNING

KITMGR_LOG_FILE adds a file handler, KITMGR_LOG_FILE_LEVEL sets its level.
"""

from __future__ import annotations

import logging
import os
import sys

# Console format per level threshold, most verbose first
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
)
_PLAIN_FORMAT = "%(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"

_THIRD_PARTY = ("pydantic", "yaml")


def parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant, WARNING if unknown."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Level name from CLI flags, falling back to KITMGR_LOG_LEVEL."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get("KITMGR_LOG_LEVEL", "WARNING")


def _handler(handler: logging.Handler, level: int, fmt: str, datefmt: str | None) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _console_handler(level: int) -> logging.Handler:
    for threshold, fmt, datefmt in _CONSOLE_FORMATS:
        if level <= threshold:
            return _handler(logging.StreamHandler(sys.stderr), level, fmt, datefmt)
    return _handler(logging.StreamHandler(sys.stderr), level, _PLAIN_FORMAT, None)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers.

    Args:
        level: Console level name.
        log_file: Optional log file, always written in the detailed format.
        log_file_level: Level for the log file, defaults to ``level``.
    """
    console_level = parse_level(level)
    handlers = [_console_handler(console_level)]

    if log_file:
        file_level = parse_level(log_file_level or level)
        handlers.append(
            _handler(
                logging.FileHandler(log_file, encoding="utf-8"),
                file_level, _FILE_FORMAT, "%Y-%m-%d %H:%M:%S",
            )
        )

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(min(h.level for h in handlers))

    # pydantic and yaml only speak up when debugging
    third_party_level = logging.NOTSET if console_level <= logging.DEBUG else logging.WARNING
    for name in _THIRD_PARTY:
        logging.getLogger(name).setLevel(third_party_level)


def configure_from_cli(debug: bool, verbose: bool, quiet: bool) -> None:
    """Set up logging from the global CLI flags and KITMGR_* variables."""
    setup_logging(
        level=resolve_level(debug, verbose, quiet),
        log_file=os.environ.get("KITMGR_LOG_FILE"),
        log_file_level=os.environ.get("KITMGR_LOG_FILE_LEVEL"),
    )
