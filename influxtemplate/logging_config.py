"""Logging setup for the CLI and for applications embedding the template.

Records up to WARNING go to stdout, ERROR and above to stderr. The HTTP stack
under ``InfluxDBClient`` logs every request, so those loggers are held at
WARNING unless running at DEBUG.
"""

import logging
import sys
from typing import Iterable, Union

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Loggers used by influxdb -> requests -> urllib3
CLIENT_LOGGERS = ("urllib3", "requests", "influxdb")


class _MaxLevelFilter(logging.Filter):
    """Pass records at or below ``max_level``."""

    def __init__(self, max_level: int) -> None:
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        return record.levelno <= self.max_level


def parse_level(level: Union[int, str]) -> int:
    """Return a numeric level for ``level`` ('debug', 'INFO', 20, ...).

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def configure_logging(
    level: Union[int, str] = logging.INFO, quiet_loggers: Iterable[str] = CLIENT_LOGGERS
) -> None:
    """Replace root handlers with the stdout/stderr pair at ``level``."""
    level = parse_level(level)
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(LOG_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(logging.WARNING))
    stdout_handler.setFormatter(fmt)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)
    stderr_handler.setFormatter(fmt)

    root.setLevel(level)
    root.addHandler(stdout_handler)
    root.addHandler(stderr_handler)

    client_level = logging.NOTSET if level <= logging.DEBUG else logging.WARNING
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(client_level)
