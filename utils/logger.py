"""Logging setup for the grid drivers.

Records emitted while the manager resolves a tick carry ``extra={"tick": n}``
and are prefixed with that tick; everything else shows ``tick -``.
"""
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_DIR = "logs"
LOG_FORMAT = "%(asctime)s [%(levelname)s] tick %(tick)s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


class TickFilter(logging.Filter):
    """Fills in ``tick`` for records logged outside a tick."""

    def filter(self, record):
        if not hasattr(record, "tick"):
            record.tick = "-"
        return True


def level_for(debug: bool = False, quiet: bool = False) -> int:
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def default_log_path() -> str:
    return os.path.join(LOG_DIR, f"grid_{datetime.now():%Y%m%d_%H%M%S}.log")


def setup_logging(debug: bool = False, quiet: bool = False,
                  log_file: Optional[str] = None, to_file: bool = True) -> Optional[str]:
    """Route grid logs to the console and, unless disabled, a rotating file.

    ``--debug`` turns on the per-phase trace, ``--quiet`` keeps only warnings.
    Calling it again replaces the handlers a previous call installed.
    Returns the log file path, or None when file logging is off.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if any(isinstance(f, TickFilter) for f in handler.filters):
            root_logger.removeHandler(handler)
            handler.close()

    handlers = [logging.StreamHandler()]
    if to_file:
        log_file = log_file or default_log_path()
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=10, encoding="utf-8",
        ))
    else:
        log_file = None

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.addFilter(TickFilter())
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level_for(debug, quiet))

    logging.getLogger("ShipGrid").debug(f"Logging to {log_file or 'console only'}")
    return log_file
