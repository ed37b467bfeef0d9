"""Health check endpoints."""

from fastapi import APIRouter

from ..... import __version__
from ..deps import get_document_store
from ..models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        document_store="not_checked",
    )


@router.get("/ready", response_model=HealthResponse)
async def readiness_check() -> HealthResponse:
    """Readiness probe.

    Checks that the document store is reachable and reports its size.
    """
    try:
        total = get_document_store().count()
        store_status = f"connected ({total} docs)"
    except Exception as e:
        store_status = f"error: {str(e)}"

    return HealthResponse(
        status="ready",
        version=__version__,
        document_store=store_status,
    )
