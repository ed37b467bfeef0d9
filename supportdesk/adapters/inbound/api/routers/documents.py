"""Admin endpoints for adding, listing and removing corpus documents."""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from .....core.services.ingestion_service import IngestionService
from ..deps import get_ingestion_service
from ..models import (
    DocumentListResponse,
    DocumentSummary,
    ErrorResponse,
    IngestRequest,
    IngestResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["documents"])


@router.post(
    "/documents",
    response_model=IngestResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Page text is empty"},
        503: {"model": ErrorResponse, "description": "Document store unavailable"},
    },
)
async def ingest_document(
    request: IngestRequest,
    service: IngestionService = Depends(get_ingestion_service),
) -> IngestResponse:
    """Chunk and store one page of extracted text, replacing earlier chunks of that page."""
    added = service.ingest_page(
        request.source_url,
        request.text,
        title=request.title,
        description=request.description,
    )
    return IngestResponse(source_url=request.source_url, documents_added=added)


@router.get(
    "/documents",
    response_model=DocumentListResponse,
    responses={503: {"model": ErrorResponse, "description": "Document store unavailable"}},
)
async def list_documents(
    limit: int | None = Query(None, ge=1, le=1000, description="Maximum documents returned"),
    service: IngestionService = Depends(get_ingestion_service),
) -> DocumentListResponse:
    """List stored documents, most recently added first."""
    documents = [
        DocumentSummary(id=doc.doc_id, content=doc.content, **doc.metadata.to_dict())
        for doc in service.list_documents(limit)
    ]
    return DocumentListResponse(documents=documents, count=len(documents))


@router.delete(
    "/documents/{doc_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown document id"},
        503: {"model": ErrorResponse, "description": "Document store unavailable"},
    },
)
async def delete_document(
    doc_id: str,
    service: IngestionService = Depends(get_ingestion_service),
) -> Response:
    """Remove one stored document."""
    service.delete_document(doc_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
