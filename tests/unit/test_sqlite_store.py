"""Unit tests for SQLiteDocumentStore."""

import sqlite3

import pytest

from supportdesk.adapters.outbound.sqlite_store import SQLiteDocumentStore
from supportdesk.core.domain import Document, DocumentMetadata
from supportdesk.core.domain.exceptions import StoreConnectionError, StoreQueryError


def test_init_db(tmp_path):
    """Database initialization creates the documents table."""
    db_file = tmp_path / "test.db"
    _store = SQLiteDocumentStore(db_file)  # noqa: F841 - needed to create DB

    with sqlite3.connect(db_file) as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT name FROM sqlite_master WHERE type='table' AND name='documents'")
        result = cursor.fetchone()
        assert result is not None
        assert result[0] == "documents"


def test_add_and_search_documents(tmp_path, sample_documents):
    store = SQLiteDocumentStore(tmp_path / "test_search.db")

    assert store.add_documents(sample_documents) == 3
    assert store.count() == 3

    results = store.search_documents("library parking", 10)
    assert [doc.doc_id for doc in results] == ["library-0"]
    assert results[0].metadata == DocumentMetadata(title="Library")


def test_search_is_or_and_case_insensitive_in_insertion_order(tmp_path, sample_documents):
    store = SQLiteDocumentStore(tmp_path / "test_or.db")
    store.add_documents(sample_documents)

    results = store.search_documents("ADMISSION LIBRARY", 10)

    assert [doc.doc_id for doc in results] == ["admissions-0", "library-0"]


def test_search_respects_max_results(tmp_path, sample_documents):
    store = SQLiteDocumentStore(tmp_path / "test_limit.db")
    store.add_documents(sample_documents)

    assert len(store.search_documents("the", 1)) == 1
    assert store.search_documents("the", 0) == []
    assert store.search_documents("   ", 10) == []


def test_like_wildcards_match_literally(tmp_path):
    store = SQLiteDocumentStore(tmp_path / "test_escape.db")
    store.add_documents(
        [
            Document(doc_id="a", content="Scholarships cover 50% of tuition"),
            Document(doc_id="b", content="Scholarships cover 50 percent"),
        ]
    )

    assert [doc.doc_id for doc in store.search_documents("50%", 10)] == ["a"]
    assert store.search_documents("cover_50", 10) == []


def test_metadata_round_trips(tmp_path, admissions_document):
    store = SQLiteDocumentStore(tmp_path / "test_meta.db")
    store.add_documents([admissions_document])

    (found,) = store.search_documents("admission", 10)
    assert found == admissions_document


def test_re_adding_replaces_document(tmp_path):
    store = SQLiteDocumentStore(tmp_path / "test_replace.db")
    store.add_documents([Document(doc_id="a", content="old fees page")])
    store.add_documents([Document(doc_id="a", content="new fees page")])

    assert store.count() == 1
    assert store.search_documents("fees", 10)[0].content == "new fees page"


def test_reset_clears_documents(tmp_path, sample_documents):
    store = SQLiteDocumentStore(tmp_path / "test_reset.db")
    store.add_documents(sample_documents)

    store.reset()

    assert store.count() == 0


def test_unopenable_database_raises(tmp_path):
    db_dir = tmp_path / "is_a_directory.db"
    db_dir.mkdir()

    with pytest.raises(StoreConnectionError):
        SQLiteDocumentStore(db_dir)


def test_query_failure_raises_store_query_error(tmp_path):
    db_file = tmp_path / "test_dropped.db"
    store = SQLiteDocumentStore(db_file)
    with sqlite3.connect(db_file) as conn:
        conn.execute("DROP TABLE documents")

    with pytest.raises(StoreQueryError):
        store.search_documents("fees", 10)


def test_list_documents_newest_first(tmp_path, sample_documents):
    store = SQLiteDocumentStore(tmp_path / "test_list.db")
    store.add_documents(sample_documents)

    assert [doc.doc_id for doc in store.list_documents()] == ["library-0", "fees-0", "admissions-0"]
    assert [doc.doc_id for doc in store.list_documents(limit=2)] == ["library-0", "fees-0"]
    assert store.list_documents(limit=0) == []


def test_delete_document(tmp_path, sample_documents):
    store = SQLiteDocumentStore(tmp_path / "test_delete.db")
    store.add_documents(sample_documents)

    assert store.delete_document("fees-0") is True
    assert store.delete_document("fees-0") is False
    assert store.count() == 2


def test_delete_by_source_matches_metadata_url(tmp_path, sample_documents):
    store = SQLiteDocumentStore(tmp_path / "test_delete_source.db")
    store.add_documents(sample_documents)
    store.add_documents(
        [
            Document(
                doc_id="admissions-1",
                content="Scholarships are available.",
                metadata=DocumentMetadata(source_url="https://example.edu/admissions"),
            )
        ]
    )

    assert store.delete_by_source("https://example.edu/admissions") == 2
    assert store.delete_by_source("https://example.edu/missing") == 0
    assert [doc.doc_id for doc in store.list_documents()] == ["library-0", "fees-0"]
