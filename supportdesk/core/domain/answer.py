"""Answer models returned to the chat flow."""

from dataclasses import dataclass, field
from enum import Enum


class AnswerOrigin(Enum):
    """Which terminal path produced an answer.

    Attributes:
        CORPUS: Sentences were synthesized from ranked documents.
        FIRST_SENTENCE: No sentence matched, the top document's lead sentence was used.
        GREETING: No candidates and the query looked like a greeting.
        UNKNOWN: No candidates, canned "I don't know" reply.
    """

    CORPUS = "corpus"
    FIRST_SENTENCE = "first_sentence"
    GREETING = "greeting"
    UNKNOWN = "unknown"


@dataclass
class AnswerResult:
    """Response to a single chat query.

    Attributes:
        response: Final answer text, never empty.
        candidates_used: Number of ranked documents that fed the answer.
        sources: Source URLs cited in the answer.
        origin: Path that produced the answer.
    """

    response: str
    candidates_used: int = 0
    sources: list[str] = field(default_factory=list)
    origin: AnswerOrigin = AnswerOrigin.UNKNOWN

    @property
    def is_fallback(self) -> bool:
        """True when the answer is a canned reply."""
        return self.origin in (AnswerOrigin.GREETING, AnswerOrigin.UNKNOWN)
