"""Extractive answer synthesis from ranked candidates.

Builds a short answer by stitching together the sentences of the top
documents that mention the query's content words, or falls back to a
canned greeting/unknown reply when the corpus has nothing to offer.
"""

import logging
import random
import re

from ..domain import AnswerOrigin, AnswerResult, ScoredCandidate
from .scoring import tokenize
from .synthesis_config import SynthesisConfig

logger = logging.getLogger(__name__)

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]")


class ResponseSynthesizer:
    """Turns a query and its ranked candidates into a response string."""

    def __init__(
        self,
        config: SynthesisConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the synthesizer.

        Args:
            config: Canned replies and limits. Defaults to SynthesisConfig().
            rng: Source of randomness for canned reply selection. Pass a
                seeded ``random.Random`` for reproducible picks.
        """
        self.config = config or SynthesisConfig()
        self._rng = rng or random.Random()
        words = "|".join(re.escape(word) for word in self.config.greeting_words)
        self._greeting_re = re.compile(rf"\b(?:{words})\b", re.IGNORECASE) if words else None

    def is_greeting(self, query: str) -> bool:
        """Check whether the query contains a greeting word."""
        return bool(self._greeting_re and self._greeting_re.search(query))

    def greeting(self) -> AnswerResult:
        return AnswerResult(
            response=self._rng.choice(self.config.greetings), origin=AnswerOrigin.GREETING
        )

    def unknown(self) -> AnswerResult:
        return AnswerResult(
            response=self._rng.choice(self.config.unknowns), origin=AnswerOrigin.UNKNOWN
        )

    def fallback(self, query: str) -> AnswerResult:
        """Canned reply for a query with no usable candidates."""
        return self.greeting() if self.is_greeting(query) else self.unknown()

    def split_sentences(self, content: str) -> list[str]:
        """Split on ``.``, ``!`` and ``?``, dropping sentences that are too short."""
        sentences = (sentence.strip() for sentence in _SENTENCE_SPLIT_RE.split(content))
        return [s for s in sentences if len(s) >= self.config.min_sentence_length]

    def _content_words(self, query: str) -> list[str]:
        return [word for word in tokenize(query) if len(word) > self.config.min_keyword_length]

    def select_sentences(self, query: str, candidates: list[ScoredCandidate]) -> list[str]:
        """Pick matching sentences from the given candidates in rank order.

        Args:
            query: User's question.
            candidates: Already-ranked candidates to draw from.

        Returns:
            Distinct sentences, at most ``max_sentences_per_document`` per
            document and ``max_sentences`` overall.
        """
        words = self._content_words(query)
        if not words:
            return []

        selected: list[str] = []
        for candidate in candidates:
            matching = [
                sentence
                for sentence in self.split_sentences(candidate.document.content)
                if any(word in sentence.lower() for word in words)
            ]
            selected.extend(matching[: self.config.max_sentences_per_document])

        return list(dict.fromkeys(selected))[: self.config.max_sentences]

    def collect_sources(self, candidates: list[ScoredCandidate]) -> list[str]:
        """Distinct non-empty source URLs of the candidates, in rank order."""
        sources: list[str] = []
        for candidate in candidates:
            url = candidate.document.metadata.source_url
            if url and url.strip() and url.strip() not in sources:
                sources.append(url.strip())
        return sources[: self.config.max_sources]

    def synthesize(self, query: str, candidates: list[ScoredCandidate]) -> AnswerResult:
        """Produce the final answer for a query.

        Args:
            query: User's question.
            candidates: Candidates sorted by similarity, possibly empty.

        Returns:
            AnswerResult whose response is never empty.
        """
        if not candidates:
            logger.debug("No candidates, using canned reply")
            return self.fallback(query)

        top = candidates[: self.config.top_documents]
        prefix = self.config.answer_prefix
        sentences = self.select_sentences(query, top)

        if sentences:
            sources = self.collect_sources(top)
            if sources:
                prefix = f"{prefix} (Sources: {', '.join(sources)})"
            logger.debug(f"Synthesized {len(sentences)} sentences from {len(top)} documents")
            return AnswerResult(
                response=f"{prefix}: {'. '.join(sentences)}.",
                candidates_used=len(top),
                sources=sources,
                origin=AnswerOrigin.CORPUS,
            )

        lead = top[0].document.content.split(".", 1)[0].strip()
        if not lead:
            logger.debug("Top candidate has no lead sentence, using canned reply")
            return self.unknown()

        return AnswerResult(
            response=f"{prefix}: {lead}.",
            candidates_used=1,
            origin=AnswerOrigin.FIRST_SENTENCE,
        )
