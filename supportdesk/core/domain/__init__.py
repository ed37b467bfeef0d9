"""Domain models for the support desk answer engine.

- document: Document, DocumentMetadata and ScoredCandidate
- answer: AnswerResult and AnswerOrigin

All models are re-exported here for convenient importing:

    from supportdesk.core.domain import Document, ScoredCandidate
"""

from .answer import AnswerOrigin, AnswerResult
from .document import Document, DocumentMetadata, ScoredCandidate

__all__ = [
    # Document models
    "Document",
    "DocumentMetadata",
    "ScoredCandidate",
    # Answer models
    "AnswerOrigin",
    "AnswerResult",
]
