"""Custom exception hierarchy for the support desk answer engine.

Each exception includes an error code, the location it was raised from,
an optional underlying cause and a JSON-ready ``to_dict``. Import from this
package directly:

    from supportdesk.core.domain.exceptions import SupportDeskError, RetrievalError
"""

# Base classes
from .base import ExceptionContext, SupportDeskError

# Configuration exceptions
from .configuration import ConfigurationError, InvalidConfigurationError

# Document store exceptions
from .document_store import (
    DocumentNotFoundError,
    DocumentStoreError,
    StoreConnectionError,
    StoreQueryError,
)

# Ingestion exceptions
from .ingestion import EmptyDocumentError, IngestionError

# Retrieval exceptions
from .retrieval import RetrievalError

# Validation exceptions
from .validation import EmptyQueryError, QueryTooLongError, ValidationError

__all__ = [
    # Base
    "ExceptionContext",
    "SupportDeskError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    # Document store
    "DocumentStoreError",
    "StoreConnectionError",
    "StoreQueryError",
    "DocumentNotFoundError",
    # Ingestion
    "IngestionError",
    "EmptyDocumentError",
    # Retrieval
    "RetrievalError",
    # Validation
    "ValidationError",
    "EmptyQueryError",
    "QueryTooLongError",
]
