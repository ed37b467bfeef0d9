"""Retrieval exceptions."""

from .base import SupportDeskError


class RetrievalError(SupportDeskError):
    """Error during document retrieval."""

    error_code = "SD_RET_001"
