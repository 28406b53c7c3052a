"""Logging setup for perfanalytics commands and library code."""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "perfanalytics"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_THIRD_PARTY_LOGGERS: tuple[str, ...] = ("matplotlib", "PIL")


def _parse_level(level: str | int) -> int:
    """Resolve a level name (``"debug"``) or number (``10``) to a logging level."""
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    resolved_level = getattr(logging, str(level).upper(), None)
    if not isinstance(resolved_level, int):
        raise ValueError(f"Invalid logging level: {level}")
    return resolved_level


def configure_logging(level: str | int = "INFO", capture_warnings: bool = True) -> None:
    """
    Configure process-wide logging for a CLI run.

    Python warnings (numpy/pandas ``RuntimeWarning`` from degenerate
    arithmetic included) are routed to the ``py.warnings`` logger so they share
    the log stream with the analytics messages.

    Args:
        level: Logging level name or number.
        capture_warnings: Route ``warnings.warn`` output through logging.
    """
    logging.basicConfig(
        level=_parse_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        force=True,
    )
    logging.captureWarnings(capture_warnings)
    for name in _THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger inside the ``perfanalytics`` namespace.

    Names outside the namespace (``__main__`` for example) are nested under it.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
