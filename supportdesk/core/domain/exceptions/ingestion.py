"""Ingestion exceptions."""

from .base import SupportDeskError


class IngestionError(SupportDeskError):
    """Error while preparing documents for the store."""

    error_code = "SD_ING_001"


class EmptyDocumentError(IngestionError):
    """Extracted page text is empty after cleaning."""

    error_code = "SD_ING_002"
