"""SQLite adapter storing ingested documents and serving keyword search."""

import json
import logging
import sqlite3
from pathlib import Path

from ...core.domain import Document, DocumentMetadata
from ...core.domain.exceptions import StoreConnectionError, StoreQueryError
from ...core.ports.document_store_port import DocumentStorePort

logger = logging.getLogger(__name__)


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards so terms match literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SQLiteDocumentStore(DocumentStorePort):
    """Document store backed by a single SQLite table."""

    def __init__(self, db_path: str | Path = "data/documents.db") -> None:
        """Initialize the SQLite document store.

        Args:
            db_path: Path to the SQLite database file.

        Raises:
            StoreConnectionError: If the database cannot be created or opened.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_db()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _init_db(self) -> None:
        """Initialize the database schema."""
        try:
            with self._connect() as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS documents (
                        id TEXT PRIMARY KEY,
                        content TEXT NOT NULL,
                        metadata TEXT NOT NULL DEFAULT '{}',
                        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                """)
                conn.commit()
        except sqlite3.Error as e:
            raise StoreConnectionError(
                "Failed to initialize document database",
                cause=e,
                context={"db_path": str(self.db_path)},
            ) from e

    @staticmethod
    def _row_to_document(row: tuple[str, str, str]) -> Document:
        doc_id, content, metadata_json = row
        try:
            metadata = json.loads(metadata_json or "{}")
        except json.JSONDecodeError:
            logger.warning(f"Ignoring unreadable metadata for document {doc_id}")
            metadata = {}
        return Document(
            doc_id=doc_id,
            content=content,
            metadata=DocumentMetadata.from_dict(metadata if isinstance(metadata, dict) else {}),
        )

    def search_documents(
        self, query: str, max_results: int = DocumentStorePort.DEFAULT_MAX_RESULTS
    ) -> list[Document]:
        """Return documents whose content contains any term of ``query``.

        Args:
            query: Whitespace-separated search terms (OR semantics).
            max_results: Maximum number of documents returned.

        Returns:
            Matching documents in insertion order.

        Raises:
            StoreQueryError: If the query fails.
        """
        terms = [term.lower() for term in query.split() if term]
        if not terms or max_results <= 0:
            return []

        clauses = " OR ".join("LOWER(content) LIKE ? ESCAPE '\\'" for _ in terms)
        params: list[str | int] = [f"%{_escape_like(term)}%" for term in terms]
        params.append(max_results)

        try:
            with self._connect() as conn:
                rows = conn.execute(
                    f"SELECT id, content, metadata FROM documents WHERE {clauses} "
                    "ORDER BY rowid LIMIT ?",
                    params,
                ).fetchall()
        except sqlite3.Error as e:
            raise StoreQueryError(
                "Keyword search failed",
                cause=e,
                context={"terms": terms, "db_path": str(self.db_path)},
            ) from e

        return [self._row_to_document(row) for row in rows]

    def add_documents(self, documents: list[Document]) -> int:
        """Insert documents, replacing content and metadata of existing ids."""
        if not documents:
            return 0

        rows = [
            (doc.doc_id, doc.content, json.dumps(doc.metadata.to_dict()))
            for doc in documents
        ]
        try:
            with self._connect() as conn:
                conn.executemany(
                    """
                    INSERT INTO documents (id, content, metadata)
                    VALUES (?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        content = excluded.content,
                        metadata = excluded.metadata
                    """,
                    rows,
                )
                conn.commit()
        except sqlite3.Error as e:
            raise StoreQueryError(
                "Failed to store documents",
                cause=e,
                context={"count": len(documents)},
            ) from e

        logger.debug(f"Stored {len(rows)} documents in {self.db_path}")
        return len(rows)

    def count(self) -> int:
        try:
            with self._connect() as conn:
                return conn.execute("SELECT COUNT(*) FROM documents").fetchone()[0]
        except sqlite3.Error as e:
            raise StoreQueryError("Failed to count documents", cause=e) from e

    def reset(self) -> None:
        try:
            with self._connect() as conn:
                conn.execute("DELETE FROM documents")
                conn.commit()
        except sqlite3.Error as e:
            raise StoreQueryError("Failed to clear documents", cause=e) from e

    def list_documents(self, limit: int | None = None) -> list[Document]:
        """Return stored documents, most recently added first.

        Args:
            limit: Maximum number of documents, or None for all of them.

        Raises:
            StoreQueryError: If the query fails.
        """
        if limit is not None and limit <= 0:
            return []

        try:
            with self._connect() as conn:
                rows = conn.execute(
                    "SELECT id, content, metadata FROM documents ORDER BY rowid DESC LIMIT ?",
                    (-1 if limit is None else limit,),
                ).fetchall()
        except sqlite3.Error as e:
            raise StoreQueryError("Failed to list documents", cause=e) from e

        return [self._row_to_document(row) for row in rows]

    def delete_document(self, doc_id: str) -> bool:
        try:
            with self._connect() as conn:
                cursor = conn.execute("DELETE FROM documents WHERE id = ?", (doc_id,))
                conn.commit()
        except sqlite3.Error as e:
            raise StoreQueryError(
                "Failed to delete document", cause=e, context={"doc_id": doc_id}
            ) from e
        return cursor.rowcount > 0

    def delete_by_source(self, source_url: str) -> int:
        """Remove all chunks of a page, matched on the ``source_url`` metadata key."""
        try:
            with self._connect() as conn:
                cursor = conn.execute(
                    "DELETE FROM documents WHERE CASE WHEN json_valid(metadata) "
                    "THEN json_extract(metadata, '$.source_url') END = ?",
                    (source_url,),
                )
                conn.commit()
        except sqlite3.Error as e:
            raise StoreQueryError(
                "Failed to delete page documents",
                cause=e,
                context={"source_url": source_url},
            ) from e

        logger.debug(f"Removed {cursor.rowcount} documents for {source_url}")
        return cursor.rowcount
