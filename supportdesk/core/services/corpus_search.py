"""Keyword retrieval and re-ranking over the document store."""

import logging

from ..domain import ScoredCandidate
from ..domain.exceptions import RetrievalError
from ..ports.document_store_port import DocumentStorePort
from .scoring import score_document, tokenize
from .synthesis_config import SynthesisConfig

logger = logging.getLogger(__name__)


class CorpusSearchService:
    """Finds the documents most lexically relevant to a query."""

    def __init__(self, store: DocumentStorePort, config: SynthesisConfig | None = None) -> None:
        """Initialize the search service.

        Args:
            store: Document store used for the coarse keyword prefilter.
            config: Stop words and candidate limits. Defaults to SynthesisConfig().
        """
        self.store = store
        self.config = config or SynthesisConfig()

    def extract_keywords(self, query: str) -> list[str]:
        """Keep query words longer than two characters that are not stop words.

        Args:
            query: Raw user query.

        Returns:
            Distinct lowercase keywords in query order.
        """
        return [
            word
            for word in tokenize(query)
            if len(word) >= self.config.min_retrieval_keyword_length
            and word not in self.config.stop_words
        ]

    def search(self, query: str) -> list[ScoredCandidate]:
        """Retrieve candidates for a query and rank them by similarity.

        Args:
            query: User's question.

        Returns:
            Candidates sorted by similarity, highest first. Equal scores keep
            the store's order. Empty when the query has no usable keywords.

        Raises:
            RetrievalError: If the document store call fails.
        """
        keywords = self.extract_keywords(query)
        if not keywords:
            logger.debug(f"No searchable keywords in query: {query!r}")
            return []

        logger.debug(f"Searching store with keywords: {keywords}")
        try:
            documents = self.store.search_documents(" ".join(keywords), self.config.max_candidates)
        except Exception as e:
            raise RetrievalError(
                "Document store search failed",
                cause=e,
                context={"keywords": keywords, "max_results": self.config.max_candidates},
            ) from e

        candidates = [
            ScoredCandidate(document=doc, similarity=score_document(query, doc.content))
            for doc in documents[: self.config.max_candidates]
        ]
        candidates.sort(key=lambda c: c.similarity, reverse=True)

        logger.info(f"Retrieved {len(candidates)} candidates for {len(keywords)} keywords")
        return candidates
