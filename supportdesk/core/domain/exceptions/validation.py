"""Validation exceptions."""

from .base import SupportDeskError


class ValidationError(SupportDeskError):
    """Input validation failed."""

    error_code = "SD_VAL_001"


class EmptyQueryError(ValidationError):
    """Query cannot be empty or whitespace only."""

    error_code = "SD_VAL_002"


class QueryTooLongError(ValidationError):
    """Query exceeds maximum allowed length."""

    error_code = "SD_VAL_003"
