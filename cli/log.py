"""
Logging setup of the command-line tools.

Library modules only create module loggers with `logging.getLogger(__name__)`;
`configure_logging` attaches the handlers once per command invocation. Log
records go to stderr so that stdout only carries the check report.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, cast

VERBOSE_LEVEL = 15
logging.addLevelName(VERBOSE_LEVEL, "VERBOSE")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ChainSpecLogger(logging.Logger):
    """Logger with a `verbose` method, used to report the progress of each file."""

    def verbose(self, msg: object, *args: Any, **kwargs: Any) -> None:
        """Log a message with VERBOSE severity, between DEBUG and INFO."""
        if self.isEnabledFor(VERBOSE_LEVEL):
            self._log(VERBOSE_LEVEL, msg, args, **kwargs)


logging.setLoggerClass(ChainSpecLogger)


def get_logger(name: str) -> ChainSpecLogger:
    """Return the logger of a module, typed with the `verbose` method."""
    return cast(ChainSpecLogger, logging.getLogger(name))


logger = get_logger(__name__)


class UTCFormatter(logging.Formatter):
    """Formats record times as ISO 8601 UTC timestamps with milliseconds."""

    def formatTime(self, record, datefmt=None):  # noqa: D102,N802
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return created.isoformat(timespec="milliseconds")


def parse_log_level(value: str) -> int:
    """
    Parse a log level given by name, in any case and `VERBOSE` included, or by number.
    """
    if value.isdigit():
        return int(value)
    levels = logging.getLevelNamesMapping()
    try:
        return levels[value.upper()]
    except KeyError:
        raise ValueError(
            f"Invalid log level '{value}'. Expected a number or one of: {', '.join(levels)}"
        ) from None


def configure_logging(log_level: int, log_file: Path | None = None) -> None:
    """
    Replace the handlers of the root logger with a stderr handler and, when
    `log_file` is given, a handler writing to that file.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode="w"))
    for handler in handlers:
        handler.setFormatter(UTCFormatter(LOG_FORMAT))
        root_logger.addHandler(handler)

    logger.verbose("Logging at level %s", logging.getLevelName(log_level))
