"""
Logging setup - one structured line per record on stdout.
"""

import json
import logging
import sys
import time


class JsonLineFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    converter = time.gmtime

    def __init__(self, datefmt: str = "%Y-%m-%dT%H:%M:%SZ"):
        super().__init__(datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def get_logger(name: str = "mashery_auth", level=logging.INFO) -> logging.Logger:
    """
    Configure and return the package logger.

    Module loggers (logging.getLogger(__name__)) propagate to it.
    Calling this more than once does not add duplicate handlers.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonLineFormatter())
        logger.addHandler(handler)

    return logger
