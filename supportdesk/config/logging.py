"""Logging setup for the support desk answer engine.

Every module logs through ``logging.getLogger(__name__)``; since all of them
live under the ``supportdesk`` package, configuring that one logger covers
the API, the CLI and the core services.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

from ..core.domain.exceptions import SupportDeskError

ROOT_LOGGER_NAME = "supportdesk"

PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(module)s:%(funcName)s | %(message)s"
PLAIN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONExceptionFormatter(logging.Formatter):
    """One JSON object per record.

    Records carrying a ``SupportDeskError`` also get its error code and
    context, so log search can filter on ``SD_STO_003`` and the like.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.filename}:{record.lineno} in {record.funcName}",
        }

        exc_type, exc, _ = record.exc_info or (None, None, None)
        if exc_type is not None:
            details: dict[str, Any] = {
                "type": exc_type.__name__,
                "message": str(exc) if exc else None,
                "traceback": self.formatException(record.exc_info),
            }
            if isinstance(exc, SupportDeskError):
                details["code"] = exc.error_code
                if exc.extra_context:
                    details["context"] = exc.extra_context
            entry["exception"] = details

        return json.dumps(entry, default=str)


def _build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JSONExceptionFormatter()
    return logging.Formatter(PLAIN_FORMAT, datefmt=PLAIN_DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the ``supportdesk`` logger.

    Safe to call repeatedly: existing handlers are closed and replaced, not stacked.

    Args:
        level: Level name such as DEBUG or WARNING. Unknown names mean INFO.
        log_file: Optional file that receives the same records as stdout.
        json_format: Emit JSON lines instead of the plain format.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for old_handler in list(logger.handlers):
        logger.removeHandler(old_handler)
        old_handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = _build_formatter(json_format)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
