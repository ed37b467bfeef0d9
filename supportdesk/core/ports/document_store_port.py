"""Document Store Port Interface."""

from abc import ABC, abstractmethod

from ..domain import Document


class DocumentStorePort(ABC):
    """Abstract interface for the document store behind corpus search.

    The store's own matching is only a coarse prefilter. Ranking is always
    recomputed by the caller, so stores may return documents in any order.
    """

    DEFAULT_MAX_RESULTS = 10

    @abstractmethod
    def search_documents(
        self, query: str, max_results: int = DEFAULT_MAX_RESULTS
    ) -> list[Document]:
        """Return up to ``max_results`` documents containing ANY whitespace-separated term of ``query``."""
        ...

    @abstractmethod
    def add_documents(self, documents: list[Document]) -> int:
        """Add or replace documents by id, returning how many were written."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Number of documents in the store."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Remove every document."""
        ...

    @abstractmethod
    def list_documents(self, limit: int | None = None) -> list[Document]:
        """Stored documents, most recently added first."""
        ...

    @abstractmethod
    def delete_document(self, doc_id: str) -> bool:
        """Remove one document by id. Returns False when no such document exists."""
        ...

    @abstractmethod
    def delete_by_source(self, source_url: str) -> int:
        """Remove every document ingested from ``source_url``, returning how many were removed."""
        ...
