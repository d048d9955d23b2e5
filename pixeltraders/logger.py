"""Console and file logging tagged with a service name."""

import logging
import os
import sys
from datetime import datetime, timezone

LOG_FILE = "playing.log"

_LEVEL_NAMES = {
    logging.DEBUG: "debug",
    logging.INFO: "info",
    logging.WARNING: "warn",
    logging.ERROR: "error",
    logging.CRITICAL: "fatal",
}


def _level_name(level):
    return _LEVEL_NAMES.get(level, logging.getLevelName(level).lower())


class _ServiceFilter(logging.Filter):
    def __init__(self, service):
        super().__init__()
        self.service = service

    def filter(self, record):
        record.service = self.service
        return True


class ServiceFormatter(logging.Formatter):
    """Formats records as: level, service, RFC 3339 time, message, then fields."""

    def format(self, record):
        level = f"{_level_name(record.levelno):<6}".upper()
        moment = datetime.fromtimestamp(record.created, tz=timezone.utc).astimezone()
        stamp = moment.isoformat(timespec="seconds")
        if moment.utcoffset() is not None and not moment.utcoffset():
            stamp = stamp[: -len("+00:00")] + "Z"
        parts = [level, getattr(record, "service", ""), stamp, record.getMessage()]
        text = " ".join(part for part in parts if part)
        fields = getattr(record, "fields", None) or {}
        for key in sorted(fields):
            text += f" {key}={fields[key]}"
        if record.exc_info:
            text += "\n" + self.formatException(record.exc_info)
        return text


def _open_log_file():
    descriptor = os.open(LOG_FILE, os.O_APPEND | os.O_CREAT | os.O_WRONLY, 0o600)
    os.close(descriptor)
    return logging.FileHandler(LOG_FILE, mode="a", encoding="utf-8")


def init_logger_by_service(name, level):
    """Configure and return the logger of one service.

    Error level logs go to the log file, every other level to standard output.
    """
    logging.getLogger("pixeltraders").setLevel(level)
    logger = logging.getLogger(f"pixeltraders.{name}")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = _open_log_file() if level == logging.ERROR else logging.StreamHandler(sys.stdout)
    handler.setFormatter(ServiceFormatter())
    handler.addFilter(_ServiceFilter(name))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    logger.info("Start application in %s mode with level %s !", name, _level_name(level))
    return logger