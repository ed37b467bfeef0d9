"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field


class QuestionRequest(BaseModel):
    """Request model for asking a question."""

    question: str = Field(
        ...,
        min_length=1,
        max_length=1000,
        description="The visitor's chat message",
        json_schema_extra={"example": "How do I apply for admission?"},
    )


class AnswerResponse(BaseModel):
    """Response model for an answered question."""

    answer: str = Field(..., description="Synthesized or canned answer text")
    sources: list[str] = Field(
        default_factory=list,
        description="Source URLs cited in the answer",
    )
    candidates_used: int = Field(0, ge=0, description="Documents that fed the answer")
    origin: str = Field(..., description="corpus, first_sentence, greeting or unknown")
    fallback: bool = Field(False, description="True when the answer is a canned reply")
    question: str = Field(..., description="The original question asked")


class IngestRequest(BaseModel):
    """Request model for adding already-extracted page text to the corpus."""

    source_url: str = Field(..., min_length=1, description="URL the text was extracted from")
    text: str = Field(..., min_length=1, description="Extracted page text")
    title: str | None = Field(None, description="Page title")
    description: str | None = Field(None, description="Page meta description")


class IngestResponse(BaseModel):
    """Response model for an ingested page."""

    source_url: str = Field(..., description="URL the text was extracted from")
    documents_added: int = Field(..., ge=0, description="Number of stored documents")


class DocumentSummary(BaseModel):
    """One stored document as shown in the admin corpus view."""

    id: str
    content: str
    source_url: str | None = None
    title: str | None = None
    description: str | None = None
    processed_at: str | None = None


class DocumentListResponse(BaseModel):
    """Stored documents, newest first."""

    documents: list[DocumentSummary]
    count: int = Field(..., ge=0, description="Number of documents returned")


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    document_store: str = Field(..., description="Document store backend status")


class ErrorDetail(BaseModel):
    """Structured error detail information."""

    type: str = Field(..., description="Exception type name")
    code: str = Field(..., description="Error code (e.g., SD_STO_002)")
    message: str = Field(..., description="Human-readable error message")


class ErrorLocation(BaseModel):
    """Source location where error occurred."""

    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(..., alias="class", description="Class name or <module>")
    method: str = Field(..., description="Method/function name")
    file: str = Field(..., description="Source file name")
    line: int = Field(..., description="Line number")
    timestamp: str | None = Field(None, description="When the error occurred")


class ErrorResponse(BaseModel):
    """Response model for structured errors.

    Example:
        {
            "error": {"type": "StoreQueryError", "code": "SD_STO_003", "message": "..."},
            "location": {"class": "SQLiteDocumentStore", "method": "search_documents", ...},
            "context": {"terms": ["fees"]},
        }
    """

    error: ErrorDetail = Field(..., description="Error details including type, code, and message")
    location: ErrorLocation | None = Field(None, description="Source location of the error")
    context: dict | None = Field(None, description="Additional debugging context")
    cause: dict | None = Field(None, description="Underlying exception that caused this error")
    stack_trace: list[str] | None = Field(None, description="Stack trace (debug mode only)")
