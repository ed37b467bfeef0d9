"""Prepares already-extracted website text for the document store."""

import hashlib
import logging
import re
from datetime import UTC, datetime

from ..domain import Document, DocumentMetadata
from ..domain.exceptions import DocumentNotFoundError, EmptyDocumentError
from ..domain.utils import chunk_paragraphs, clean_content, clean_text
from ..ports.document_store_port import DocumentStorePort

logger = logging.getLogger(__name__)


def format_page_content(title: str | None, description: str | None, body: str) -> str:
    """Lay out a page as a titled text block.

    Pages without a title or description keep only the body.
    """
    if not title and not description:
        return body
    return f"Title: {title or ''}\n\nDescription: {description or ''}\n\nContent:\n{body}"


class IngestionService:
    """Turns page text into chunked documents and manages the stored corpus."""

    def __init__(self, store: DocumentStorePort, max_chunk_size: int = 1000) -> None:
        """Initialize the ingestion service.

        Args:
            store: Destination document store.
            max_chunk_size: Maximum characters per stored document.
        """
        self.store = store
        self.max_chunk_size = max_chunk_size

    def build_documents(
        self,
        source_url: str,
        text: str,
        title: str | None = None,
        description: str | None = None,
    ) -> list[Document]:
        """Clean, lay out and chunk one page.

        Args:
            source_url: URL the text was extracted from.
            text: Extracted page text, paragraphs separated by blank lines.
            title: Optional page title.
            description: Optional page description.

        Returns:
            Documents with stable ids derived from the URL.

        Raises:
            EmptyDocumentError: If the text is blank after cleaning.
        """
        paragraphs = [clean_content(p) for p in re.split(r"\n\s*\n", clean_text(text))]
        body = "\n\n".join(p for p in paragraphs if p)
        if not body:
            raise EmptyDocumentError(
                "Extracted page text is empty", context={"source_url": source_url}
            )

        title = clean_content(title or "") or None
        description = clean_content(description or "") or None
        content = format_page_content(title, description, body)
        chunks = chunk_paragraphs(content, self.max_chunk_size)

        metadata = DocumentMetadata(
            source_url=source_url,
            title=title,
            description=description,
            processed_at=datetime.now(UTC).isoformat(),
        )
        url_hash = hashlib.sha1(source_url.encode()).hexdigest()[:10]
        return [
            Document(doc_id=f"{url_hash}-{i}", content=chunk, metadata=metadata)
            for i, chunk in enumerate(chunks)
        ]

    def ingest_page(
        self,
        source_url: str,
        text: str,
        title: str | None = None,
        description: str | None = None,
    ) -> int:
        """Build documents for a page and replace whatever the store held for it.

        Chunks from an earlier ingestion of the same URL are removed first,
        so a page that shrank leaves no stale chunks behind.

        Returns:
            Number of documents written.
        """
        documents = self.build_documents(source_url, text, title, description)
        replaced = self.store.delete_by_source(source_url)
        added = self.store.add_documents(documents)
        logger.info(f"Ingested {added} documents from {source_url} (replaced {replaced})")
        return added

    def list_documents(self, limit: int | None = None) -> list[Document]:
        """Stored documents for the admin view, newest first."""
        return self.store.list_documents(limit)

    def delete_document(self, doc_id: str) -> None:
        """Remove one stored document.

        Raises:
            DocumentNotFoundError: If no document has this id.
        """
        if not self.store.delete_document(doc_id):
            raise DocumentNotFoundError(
                f"Document '{doc_id}' not found", context={"doc_id": doc_id}
            )
        logger.info(f"Deleted document {doc_id}")
