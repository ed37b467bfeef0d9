"""Composition root wiring adapters to the application services."""

from __future__ import annotations

import logging
from functools import lru_cache

from ..adapters.outbound.memory_store import InMemoryDocumentStore
from ..adapters.outbound.sqlite_store import SQLiteDocumentStore
from ..config.settings import settings
from ..core.ports.document_store_port import DocumentStorePort
from ..core.services.answer_service import AnswerService
from ..core.services.corpus_search import CorpusSearchService
from ..core.services.ingestion_service import IngestionService
from ..core.services.response_synthesizer import ResponseSynthesizer
from ..core.services.synthesis_config import SynthesisConfig

logger = logging.getLogger(__name__)


@lru_cache
def get_synthesis_config() -> SynthesisConfig:
    return SynthesisConfig.from_settings(settings)


@lru_cache
def get_document_store() -> DocumentStorePort:
    logger.info(f"Initializing document store (backend={settings.store_backend})...")
    if settings.store_backend == "memory":
        return InMemoryDocumentStore()
    settings.ensure_directories()
    return SQLiteDocumentStore(settings.database_path)


@lru_cache
def get_answer_service() -> AnswerService:
    logger.info("Initializing AnswerService...")
    config = get_synthesis_config()
    search = CorpusSearchService(get_document_store(), config)
    return AnswerService(search, ResponseSynthesizer(config))


@lru_cache
def get_ingestion_service() -> IngestionService:
    logger.info("Initializing IngestionService...")
    return IngestionService(get_document_store(), max_chunk_size=settings.chunk_size)


def reset_container() -> None:
    """Drop cached instances so the next call rebuilds them from settings."""
    for factory in (
        get_synthesis_config,
        get_document_store,
        get_answer_service,
        get_ingestion_service,
    ):
        factory.cache_clear()
