"""Integration tests for the Typer CLI."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from supportdesk.adapters.inbound.cli.commands import app
from supportdesk.adapters.outbound.memory_store import InMemoryDocumentStore
from supportdesk.core.domain import Document, DocumentMetadata
from supportdesk.core.domain.exceptions import StoreConnectionError
from supportdesk.core.services.answer_service import AnswerService
from supportdesk.core.services.corpus_search import CorpusSearchService
from supportdesk.core.services.ingestion_service import IngestionService
from supportdesk.core.services.response_synthesizer import ResponseSynthesizer

pytestmark = pytest.mark.integration

runner = CliRunner()

CONTAINER = "supportdesk.composition.container"


@pytest.fixture
def store(admissions_document):
    return InMemoryDocumentStore([admissions_document])


def test_ask_prints_answer_and_sources(store):
    service = AnswerService(CorpusSearchService(store), ResponseSynthesizer())
    with patch(f"{CONTAINER}.get_answer_service", return_value=service):
        result = runner.invoke(app, ["ask", "How do I apply for admission?"])

    assert result.exit_code == 0
    assert "Based on our information" in result.output
    assert "https://example.edu/admissions" in result.output


def test_ask_reports_construction_errors():
    with patch(
        f"{CONTAINER}.get_answer_service",
        side_effect=StoreConnectionError("Failed to initialize document database"),
    ):
        result = runner.invoke(app, ["ask", "fees"])

    assert result.exit_code == 1
    assert "SD_STO_002" in result.output


def test_chat_loop_until_quit(store):
    service = AnswerService(CorpusSearchService(store), ResponseSynthesizer())
    with patch(f"{CONTAINER}.get_answer_service", return_value=service):
        result = runner.invoke(app, ["chat"], input="How do I apply for admission?\nquit\n")

    assert result.exit_code == 0
    assert "Based on our information" in result.output
    assert "Goodbye" in result.output


def test_ingest_file(tmp_path, store):
    page = tmp_path / "fees.txt"
    page.write_text("Fees are due at enrollment and can be paid online.", encoding="utf-8")

    with patch(f"{CONTAINER}.get_ingestion_service", return_value=IngestionService(store)):
        result = runner.invoke(
            app, ["ingest", str(page), "--url", "https://example.edu/fees", "--title", "Fees"]
        )

    assert result.exit_code == 0
    assert "Stored 1 documents" in result.output
    assert store.count() == 2


def test_ingest_blank_file_fails(tmp_path, store):
    page = tmp_path / "blank.txt"
    page.write_text("  \n\n ", encoding="utf-8")

    with patch(f"{CONTAINER}.get_ingestion_service", return_value=IngestionService(store)):
        result = runner.invoke(app, ["ingest", str(page), "--url", "https://example.edu/blank"])

    assert result.exit_code == 1
    assert "SD_ING_002" in result.output


def test_status_reports_document_count(store):
    with patch(f"{CONTAINER}.get_document_store", return_value=store):
        result = runner.invoke(app, ["status"])

    assert result.exit_code == 0
    assert "Total: 1 documents" in result.output


def test_status_empty_corpus():
    with patch(f"{CONTAINER}.get_document_store", return_value=InMemoryDocumentStore()):
        result = runner.invoke(app, ["status"])

    assert result.exit_code == 0
    assert "Corpus is empty" in result.output


def test_ask_prints_bracketed_corpus_text_verbatim():
    store = InMemoryDocumentStore(
        [
            Document(
                doc_id="portal-0",
                content="To apply for admission, open the [/portal] page and sign in.",
                metadata=DocumentMetadata(source_url="https://example.edu/[apply]"),
            )
        ]
    )
    service = AnswerService(CorpusSearchService(store), ResponseSynthesizer())
    with patch(f"{CONTAINER}.get_answer_service", return_value=service):
        result = runner.invoke(app, ["ask", "apply admission"])

    assert result.exit_code == 0
    assert "[/portal]" in result.output
    assert "https://example.edu/[apply]" in result.output


def test_documents_lists_newest_first(store):
    service = IngestionService(store)
    service.ingest_page("https://example.edu/fees", "Fees are due at enrollment.")
    newest_id = service.list_documents()[0].doc_id

    with patch(f"{CONTAINER}.get_ingestion_service", return_value=service):
        result = runner.invoke(app, ["documents"])

    assert result.exit_code == 0
    assert result.output.index(newest_id) < result.output.index("admissions-0")


def test_delete_document(store):
    with patch(f"{CONTAINER}.get_ingestion_service", return_value=IngestionService(store)):
        result = runner.invoke(app, ["delete", "admissions-0"])

    assert result.exit_code == 0
    assert "Deleted document admissions-0" in result.output
    assert store.count() == 0


def test_delete_unknown_document_fails(store):
    with patch(f"{CONTAINER}.get_ingestion_service", return_value=IngestionService(store)):
        result = runner.invoke(app, ["delete", "missing-0"])

    assert result.exit_code == 1
    assert "SD_STO_004" in result.output
    assert store.count() == 1
