"""Document and scored candidate models for the answer engine."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DocumentMetadata:
    """Provenance information attached to an ingested document.

    Every field is optional. Scoring never reads metadata; synthesis only
    reads ``source_url`` for attribution.

    Attributes:
        source_url: Page the content was extracted from.
        title: Page title at extraction time.
        description: Page meta description at extraction time.
        processed_at: ISO-8601 timestamp of ingestion.
    """

    source_url: str | None = None
    title: str | None = None
    description: str | None = None
    processed_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "DocumentMetadata":
        """Build metadata from a loosely typed mapping, ignoring unknown keys."""
        if not data:
            return cls()
        return cls(
            source_url=data.get("source_url") or None,
            title=data.get("title") or None,
            description=data.get("description") or None,
            processed_at=data.get("processed_at") or None,
        )

    def to_dict(self) -> dict[str, str]:
        """Serialize, dropping unset fields."""
        values = {
            "source_url": self.source_url,
            "title": self.title,
            "description": self.description,
            "processed_at": self.processed_at,
        }
        return {key: value for key, value in values.items() if value}


@dataclass(frozen=True)
class Document:
    """An ingested unit of text content.

    Documents are created by ingestion and never modified by search or
    synthesis.

    Attributes:
        doc_id: Opaque unique identifier.
        content: Full text body.
        metadata: Provenance information.
    """

    doc_id: str
    content: str
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)


@dataclass(frozen=True)
class ScoredCandidate:
    """A document annotated with its lexical similarity to one query.

    Attributes:
        document: The candidate Document.
        similarity: Non-negative relevance score (0.0 to 2.0, higher is better).
    """

    document: Document
    similarity: float
