"""Document store exceptions."""

from .base import SupportDeskError


class DocumentStoreError(SupportDeskError):
    """Base error for document store operations."""

    error_code = "SD_STO_001"


class StoreConnectionError(DocumentStoreError):
    """Failed to open or reach the document store.

    Common causes:
    - Database file path is not writable
    - Database file is locked or corrupted
    """

    error_code = "SD_STO_002"


class StoreQueryError(DocumentStoreError):
    """Failed to query or write to the document store."""

    error_code = "SD_STO_003"


class DocumentNotFoundError(DocumentStoreError):
    """No stored document has the requested id."""

    error_code = "SD_STO_004"
