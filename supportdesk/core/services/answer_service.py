"""Use-case service answering a chat message from the document corpus."""

import logging

from ..domain import AnswerResult
from ..domain.exceptions import EmptyQueryError, QueryTooLongError, RetrievalError, ValidationError
from ..domain.utils import normalize_text
from .corpus_search import CorpusSearchService
from .response_synthesizer import ResponseSynthesizer

logger = logging.getLogger(__name__)


class AnswerService:
    """Orchestrates corpus search and response synthesis.

    ``answer_query`` never raises: invalid queries and store failures both
    degrade to a canned reply.
    """

    def __init__(self, search: CorpusSearchService, synthesizer: ResponseSynthesizer) -> None:
        self.search = search
        self.synthesizer = synthesizer

    def validate_query(self, query: str) -> str:
        """Normalize a query and reject empty or over-long input.

        Raises:
            EmptyQueryError: If nothing remains after trimming.
            QueryTooLongError: If the query exceeds the configured length.
        """
        clean_query = normalize_text(query or "")
        if not clean_query:
            raise EmptyQueryError("Query cannot be empty or whitespace only")

        max_length = self.synthesizer.config.max_query_length
        if len(clean_query) > max_length:
            raise QueryTooLongError(
                f"Query exceeds {max_length} characters",
                context={"length": len(clean_query), "max_length": max_length},
            )
        return clean_query

    def answer_query(self, query: str) -> AnswerResult:
        """Answer a user message.

        Args:
            query: Raw user message.

        Returns:
            AnswerResult with the response text, number of documents used
            and cited source URLs.
        """
        try:
            clean_query = self.validate_query(query)
        except ValidationError as e:
            logger.info(f"Rejected query [{e.error_code}]: {e.message}")
            return self.synthesizer.unknown()

        try:
            candidates = self.search.search(clean_query)
        except RetrievalError as e:
            logger.warning(f"Retrieval failed [{e.error_code}], answering without documents: {e}")
            candidates = []

        result = self.synthesizer.synthesize(clean_query, candidates)
        logger.info(
            f"Answered query with origin={result.origin.value} "
            f"candidates_used={result.candidates_used} sources={len(result.sources)}"
        )
        return result
