"""In-memory document store for tests, demos and the ``memory`` backend."""

import logging
import threading

from ...core.domain import Document
from ...core.ports.document_store_port import DocumentStorePort

logger = logging.getLogger(__name__)


class InMemoryDocumentStore(DocumentStorePort):
    """Dict-backed store that keeps insertion order."""

    def __init__(self, documents: list[Document] | None = None) -> None:
        self._documents: dict[str, Document] = {}
        self._lock = threading.Lock()
        if documents:
            self.add_documents(documents)

    def search_documents(
        self, query: str, max_results: int = DocumentStorePort.DEFAULT_MAX_RESULTS
    ) -> list[Document]:
        terms = [term.lower() for term in query.split() if term]
        if not terms or max_results <= 0:
            return []

        with self._lock:
            documents = list(self._documents.values())

        matches = []
        for doc in documents:
            content = doc.content.lower()
            if any(term in content for term in terms):
                matches.append(doc)
                if len(matches) >= max_results:
                    break
        return matches

    def add_documents(self, documents: list[Document]) -> int:
        with self._lock:
            for doc in documents:
                # Replacing keeps the original slot so ordering stays stable
                self._documents[doc.doc_id] = doc
        logger.debug(f"Stored {len(documents)} documents in memory")
        return len(documents)

    def count(self) -> int:
        with self._lock:
            return len(self._documents)

    def reset(self) -> None:
        with self._lock:
            self._documents.clear()

    def list_documents(self, limit: int | None = None) -> list[Document]:
        with self._lock:
            newest_first = list(reversed(self._documents.values()))
        return newest_first if limit is None else newest_first[: max(limit, 0)]

    def delete_document(self, doc_id: str) -> bool:
        with self._lock:
            removed = self._documents.pop(doc_id, None)
        return removed is not None

    def delete_by_source(self, source_url: str) -> int:
        with self._lock:
            stale = [
                doc_id
                for doc_id, doc in self._documents.items()
                if doc.metadata.source_url == source_url
            ]
            for doc_id in stale:
                del self._documents[doc_id]
        return len(stale)
