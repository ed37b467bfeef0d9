"""Chat endpoint answering visitor questions from the document corpus."""

import logging

from fastapi import APIRouter, Depends

from .....core.services.answer_service import AnswerService
from ..deps import get_answer_service
from ..models import AnswerResponse, ErrorResponse, QuestionRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["chat"])


@router.post(
    "/ask",
    response_model=AnswerResponse,
    responses={
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
async def ask_question(
    request: QuestionRequest,
    service: AnswerService = Depends(get_answer_service),
) -> AnswerResponse:
    """Answer a chat message.

    Store failures degrade to a canned reply, so this endpoint answers
    with 200 whenever the service can be built.
    """
    result = service.answer_query(request.question)
    return AnswerResponse(
        answer=result.response,
        sources=result.sources,
        candidates_used=result.candidates_used,
        origin=result.origin.value,
        fallback=result.is_fallback,
        question=request.question,
    )
