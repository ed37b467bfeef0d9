"""Core services: scoring, corpus search, synthesis, answering and ingestion."""

from .answer_service import AnswerService
from .corpus_search import CorpusSearchService
from .ingestion_service import IngestionService
from .response_synthesizer import ResponseSynthesizer
from .scoring import score_document, tokenize
from .synthesis_config import SynthesisConfig

__all__ = [
    "AnswerService",
    "CorpusSearchService",
    "IngestionService",
    "ResponseSynthesizer",
    "SynthesisConfig",
    "score_document",
    "tokenize",
]
