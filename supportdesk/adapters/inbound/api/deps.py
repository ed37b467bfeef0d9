"""FastAPI dependency injection for the answer engine."""

from ....composition.container import (
    get_answer_service,
    get_document_store,
    get_ingestion_service,
)

__all__ = ["get_answer_service", "get_document_store", "get_ingestion_service"]
