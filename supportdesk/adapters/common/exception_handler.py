"""Turns exceptions into the structured error payloads the adapters return.

The API and the CLI both render errors through ``format_exception_json`` so
a visitor-facing 503 and a terminal error carry the same code and location.
"""

import json
import logging
import traceback
from typing import Any

from ...core.domain.exceptions import (
    DocumentNotFoundError,
    DocumentStoreError,
    IngestionError,
    RetrievalError,
    SupportDeskError,
    ValidationError,
)

logger = logging.getLogger(__name__)

UNHANDLED_ERROR_CODE = "SD_UNHANDLED"

# First match wins, so subclasses must precede their bases.
_STATUS_BY_TYPE: tuple[tuple[type[BaseException] | tuple[type[BaseException], ...], int], ...] = (
    (ValidationError, 400),
    (IngestionError, 422),
    (DocumentNotFoundError, 404),
    ((DocumentStoreError, RetrievalError), 503),
    (SupportDeskError, 500),
    (ValueError, 400),
    ((ConnectionError, TimeoutError), 503),
)


def _frame_location(exc: BaseException) -> dict[str, Any]:
    frames = traceback.extract_tb(exc.__traceback__) if exc.__traceback__ else []
    if not frames:
        return {"class": "<unknown>", "method": "<unknown>", "file": "<unknown>", "line": 0}

    last = frames[-1]
    return {
        "class": "<unknown>",
        "method": last.name,
        "file": last.filename.replace("\\", "/").rsplit("/", 1)[-1],
        "line": last.lineno,
    }


def format_exception_json(
    exc: Exception,
    include_trace: bool = False,
    extra_context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Render an exception as an error payload.

    Support desk errors use their own ``to_dict``. Anything else gets the
    same shape with ``SD_UNHANDLED`` as its code and the innermost
    traceback frame as its location.

    Args:
        exc: The exception to format.
        include_trace: If True, add the formatted stack trace.
        extra_context: Request or command details merged into ``context``.

    Returns:
        Dictionary with ``error`` and ``location`` keys, plus ``context``
        and ``stack_trace`` when available.
    """
    if isinstance(exc, SupportDeskError):
        payload = exc.to_dict(include_trace=include_trace)
    else:
        payload = {
            "error": {
                "type": type(exc).__name__,
                "code": get_error_code(exc),
                "message": str(exc),
            },
            "location": _frame_location(exc),
        }
        if include_trace:
            lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
            payload["stack_trace"] = [line.strip() for line in lines if line.strip()]

    if extra_context:
        payload["context"] = {**payload.get("context", {}), **extra_context}
    return payload


def log_exception(
    exc: Exception,
    log: logging.Logger | None = None,
    level: int | None = None,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """Log an exception as a single JSON line.

    Client errors (4xx) log at WARNING and server errors at ERROR unless
    ``level`` is given.
    """
    if level is None:
        level = logging.WARNING if get_http_status_code(exc) < 500 else logging.ERROR

    payload = format_exception_json(exc, include_trace=True, extra_context=extra_context)
    (log or logger).log(level, json.dumps(payload, default=str))


def get_error_code(exc: Exception) -> str:
    if isinstance(exc, SupportDeskError):
        return exc.error_code
    return UNHANDLED_ERROR_CODE


def get_http_status_code(exc: Exception) -> int:
    """HTTP status for an exception: 400, 404, 422, 503, or 500 when unmapped."""
    for exc_types, status in _STATUS_BY_TYPE:
        if isinstance(exc, exc_types):
            return status
    return 500
