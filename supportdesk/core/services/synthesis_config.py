"""Constant configuration owned by corpus search and response synthesis."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.exceptions import InvalidConfigurationError

if TYPE_CHECKING:
    from ...config.settings import Settings

DEFAULT_STOP_WORDS = frozenset({"the", "and", "but", "for", "with"})

DEFAULT_GREETING_WORDS = ("hello", "hi", "hey")

DEFAULT_GREETINGS = (
    "Hello! How can I help you today?",
    "Hi there! What would you like to know?",
    "Hey! Ask me anything about our courses, admissions or services.",
)

DEFAULT_UNKNOWNS = (
    "I'm sorry, I don't have enough information to answer that question.",
    "I couldn't find anything about that. Could you try rephrasing your question?",
    "I don't have details on that yet. Please leave an enquiry and our team will get back to you.",
)


@dataclass(frozen=True)
class SynthesisConfig:
    """Word lists, canned replies and limits for answering a query.

    Instances are immutable. Callers that need different wording or limits
    build their own instance and inject it instead of mutating this one.
    """

    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    greeting_words: tuple[str, ...] = DEFAULT_GREETING_WORDS
    greetings: tuple[str, ...] = DEFAULT_GREETINGS
    unknowns: tuple[str, ...] = DEFAULT_UNKNOWNS
    answer_prefix: str = "Based on our information"

    # Retrieval
    min_retrieval_keyword_length: int = 3
    max_candidates: int = 10

    # Synthesis
    top_documents: int = 3
    max_sentences_per_document: int = 2
    max_sentences: int = 3
    min_sentence_length: int = 20
    min_keyword_length: int = 3
    max_sources: int = 2

    max_query_length: int = 1000

    def __post_init__(self) -> None:
        if not self.greetings or not self.unknowns:
            raise InvalidConfigurationError(
                "Canned greeting and unknown responses must not be empty",
                context={"greetings": len(self.greetings), "unknowns": len(self.unknowns)},
            )
        if any(not reply.strip() for reply in (*self.greetings, *self.unknowns)):
            raise InvalidConfigurationError("Canned responses must not be blank")
        if self.max_candidates <= 0 or self.top_documents <= 0:
            raise InvalidConfigurationError(
                "Candidate limits must be positive",
                context={
                    "max_candidates": self.max_candidates,
                    "top_documents": self.top_documents,
                },
            )
        if self.max_sentences <= 0 or self.max_sentences_per_document <= 0:
            raise InvalidConfigurationError(
                "Sentence limits must be positive",
                context={
                    "max_sentences": self.max_sentences,
                    "max_sentences_per_document": self.max_sentences_per_document,
                },
            )
        if self.max_sources < 0:
            raise InvalidConfigurationError(
                "max_sources must not be negative", context={"max_sources": self.max_sources}
            )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "SynthesisConfig":
        """Build a config from application settings, keeping default word lists."""
        return cls(
            max_candidates=settings.max_candidates,
            top_documents=settings.top_documents,
            max_sentences_per_document=settings.max_sentences_per_document,
            max_sentences=settings.max_sentences,
            min_sentence_length=settings.min_sentence_length,
            min_keyword_length=settings.min_keyword_length,
            max_sources=settings.max_sources,
            max_query_length=settings.max_query_length,
        )
