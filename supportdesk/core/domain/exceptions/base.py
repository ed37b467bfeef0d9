"""Root of the support desk exception hierarchy.

A ``SupportDeskError`` remembers where it was constructed (class, function,
file, line) and renders itself as the JSON error payload the API returns,
so handlers never need to dig through tracebacks to report a failure.
"""

import inspect
import traceback
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import FrameType
from typing import Any


@dataclass
class ExceptionContext:
    """Where an exception was raised."""

    class_name: str
    method_name: str
    file_name: str
    line_number: int
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    @classmethod
    def from_frame(cls, frame: FrameType | None) -> "ExceptionContext":
        if frame is None:
            return cls("<unknown>", "<unknown>", "<unknown>", 0)

        owner = frame.f_locals.get("self")
        return cls(
            class_name=type(owner).__name__ if owner is not None else "<module>",
            method_name=frame.f_code.co_name,
            file_name=frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1],
            line_number=frame.f_lineno,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "class": self.class_name,
            "method": self.method_name,
            "file": self.file_name,
            "line": self.line_number,
            "timestamp": self.timestamp,
        }


class SupportDeskError(Exception):
    """Base exception for all support desk errors.

    Subclasses only set ``error_code``; they must not override ``__init__``
    or the captured location would point inside the subclass.

    Example:
        try:
            conn.execute(sql, params)
        except sqlite3.Error as e:
            raise StoreQueryError("Keyword search failed", cause=e, context={"terms": terms}) from e
    """

    error_code: str = "SD_ERR_001"

    def __init__(
        self,
        message: str,
        *,
        cause: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Create the error and record the caller's location.

        Args:
            message: Human-readable error message.
            cause: Underlying exception, reported under ``cause``.
            context: Extra key-value pairs reported under ``context``.
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.extra_context = context or {}

        frame = inspect.currentframe()
        try:
            self.location = ExceptionContext.from_frame(frame.f_back if frame else None)
        finally:
            del frame

        self.stack_trace = traceback.format_exc() if cause else None

    def to_dict(self, include_trace: bool = False) -> dict[str, Any]:
        """Build the structured error payload.

        Args:
            include_trace: Add the stack trace of the active exception, if any.

        Returns:
            Dictionary with ``error`` and ``location``, plus ``context``,
            ``cause`` and ``stack_trace`` when present.
        """
        payload: dict[str, Any] = {
            "error": {
                "type": type(self).__name__,
                "code": self.error_code,
                "message": self.message,
            },
            "location": self.location.to_dict(),
        }
        if self.extra_context:
            payload["context"] = dict(self.extra_context)
        if self.cause is not None:
            payload["cause"] = {"type": type(self.cause).__name__, "message": str(self.cause)}
        if include_trace and self.stack_trace:
            payload["stack_trace"] = [line for line in self.stack_trace.splitlines() if line.strip()]
        return payload
