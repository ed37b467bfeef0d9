"""
Pytest configuration and shared fixtures.
"""

import random

import pytest

from supportdesk.adapters.outbound.memory_store import InMemoryDocumentStore
from supportdesk.core.domain import Document, DocumentMetadata


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (HTTP app, CLI, SQLite)")


ADMISSIONS_CONTENT = (
    "Admission Process. To apply, submit your application online before June 1st. "
    "Required documents include transcripts and ID proof. Fees are due at enrollment."
)


@pytest.fixture
def admissions_document():
    """Single admissions page with a source URL."""
    return Document(
        doc_id="admissions-0",
        content=ADMISSIONS_CONTENT,
        metadata=DocumentMetadata(source_url="https://example.edu/admissions"),
    )


@pytest.fixture
def sample_documents(admissions_document):
    """Small corpus covering admissions, fees and the library."""
    return [
        admissions_document,
        Document(
            doc_id="fees-0",
            content=(
                "Tuition fees are published every March. Fees can be paid online "
                "or at the accounts office. Late fees apply after the due date."
            ),
            metadata=DocumentMetadata(source_url="https://example.edu/fees", title="Fees"),
        ),
        Document(
            doc_id="library-0",
            content=(
                "The library is open from 8am to 10pm on weekdays. "
                "Students need their ID card to borrow books."
            ),
            metadata=DocumentMetadata(title="Library"),
        ),
    ]


@pytest.fixture
def memory_store(sample_documents):
    """In-memory store preloaded with the sample corpus."""
    return InMemoryDocumentStore(sample_documents)


@pytest.fixture
def seeded_rng():
    """Deterministic random source for canned reply selection."""
    return random.Random(42)
