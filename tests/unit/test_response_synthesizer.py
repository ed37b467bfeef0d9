"""Unit tests for ResponseSynthesizer."""

import random

import pytest

from supportdesk.core.domain import AnswerOrigin, Document, DocumentMetadata, ScoredCandidate
from supportdesk.core.domain.exceptions import InvalidConfigurationError
from supportdesk.core.services.response_synthesizer import ResponseSynthesizer
from supportdesk.core.services.synthesis_config import (
    DEFAULT_GREETINGS,
    DEFAULT_UNKNOWNS,
    SynthesisConfig,
)

pytestmark = pytest.mark.unit


def candidate(content, url=None, doc_id="doc", similarity=1.0):
    return ScoredCandidate(
        document=Document(
            doc_id=doc_id, content=content, metadata=DocumentMetadata(source_url=url)
        ),
        similarity=similarity,
    )


@pytest.fixture
def synthesizer(seeded_rng):
    return ResponseSynthesizer(rng=seeded_rng)


class TestFallbacks:
    def test_no_candidates_unknown(self, synthesizer):
        result = synthesizer.synthesize("tell me about fees", [])
        assert result.response in DEFAULT_UNKNOWNS
        assert result.origin is AnswerOrigin.UNKNOWN
        assert result.candidates_used == 0
        assert result.sources == []

    @pytest.mark.parametrize("query", ["hello", "Hi there", "HEY, anyone?", "well hello!"])
    def test_no_candidates_greeting(self, synthesizer, query):
        result = synthesizer.synthesize(query, [])
        assert result.response in DEFAULT_GREETINGS
        assert result.origin is AnswerOrigin.GREETING

    def test_greeting_requires_whole_word(self, synthesizer):
        assert not synthesizer.is_greeting("this is history")
        assert not synthesizer.is_greeting("they")

    def test_selection_uses_injected_random_source(self):
        first = ResponseSynthesizer(rng=random.Random(7)).unknown().response
        second = ResponseSynthesizer(rng=random.Random(7)).unknown().response
        assert first == second

    def test_custom_canned_replies(self):
        config = SynthesisConfig(greetings=("Namaste!",), unknowns=("No idea, sorry.",))
        synthesizer = ResponseSynthesizer(config)
        assert synthesizer.synthesize("hello", []).response == "Namaste!"
        assert synthesizer.synthesize("parking", []).response == "No idea, sorry."

    def test_empty_canned_set_is_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            SynthesisConfig(unknowns=())

    @pytest.mark.parametrize(
        "limits",
        [
            {"max_sentences": 0},
            {"max_sentences_per_document": 0},
            {"max_sources": -1},
        ],
    )
    def test_unusable_sentence_limits_are_rejected(self, limits):
        with pytest.raises(InvalidConfigurationError):
            SynthesisConfig(**limits)

    def test_zero_sources_is_allowed(self):
        assert SynthesisConfig(max_sources=0).max_sources == 0


class TestSentenceHandling:
    def test_split_drops_short_sentences(self, synthesizer):
        sentences = synthesizer.split_sentences("Yes. No! Maybe? This sentence is long enough.")
        assert sentences == ["This sentence is long enough"]

    def test_at_most_two_sentences_per_document(self, synthesizer):
        content = (
            "Fees are listed on the portal page. Fees can be paid in two parts. "
            "Fees for hostels are separate from tuition."
        )
        sentences = synthesizer.select_sentences("fees", [candidate(content)])
        assert sentences == [
            "Fees are listed on the portal page",
            "Fees can be paid in two parts",
        ]

    def test_at_most_three_sentences_overall_in_rank_order(self, synthesizer):
        candidates = [
            candidate("Fees are listed on the portal page. Fees can be paid in two parts.", doc_id="a"),
            candidate("Hostel fees are charged per semester. Fees are refundable for a month.", doc_id="b"),
        ]
        sentences = synthesizer.select_sentences("fees", candidates)
        assert sentences == [
            "Fees are listed on the portal page",
            "Fees can be paid in two parts",
            "Hostel fees are charged per semester",
        ]

    def test_duplicate_sentences_are_removed(self, synthesizer):
        text = "Fees are listed on the portal page. Nothing else is relevant here."
        candidates = [candidate(text, doc_id="a"), candidate(text, doc_id="b")]
        assert synthesizer.select_sentences("fees", candidates) == [
            "Fees are listed on the portal page"
        ]

    def test_short_query_words_do_not_select_sentences(self, synthesizer):
        # Only words longer than three characters count
        content = "The bus leaves the main gate at noon every day."
        assert synthesizer.select_sentences("bus", [candidate(content)]) == []


class TestSynthesize:
    def test_answer_with_sources(self, synthesizer, admissions_document):
        result = synthesizer.synthesize(
            "How do I apply for admission?",
            [ScoredCandidate(document=admissions_document, similarity=1.0)],
        )
        assert result.response == (
            "Based on our information (Sources: https://example.edu/admissions): "
            "To apply, submit your application online before June 1st."
        )
        assert result.sources == ["https://example.edu/admissions"]
        assert result.candidates_used == 1
        assert result.origin is AnswerOrigin.CORPUS

    def test_answer_without_sources(self, synthesizer):
        result = synthesizer.synthesize(
            "library hours", [candidate("The library is open until ten at night.")]
        )
        assert result.response == "Based on our information: The library is open until ten at night."
        assert result.sources == []

    def test_sources_are_distinct_and_capped(self, synthesizer):
        candidates = [
            candidate("Fees are listed on the portal page.", url="https://a.example", doc_id="1"),
            candidate("Fees can be paid in two parts.", url="https://a.example", doc_id="2"),
            candidate("Fees for hostels are separate.", url="https://b.example", doc_id="3"),
            candidate("Fees for transport are separate.", url="https://c.example", doc_id="4"),
        ]
        result = synthesizer.synthesize("fees", candidates)
        assert result.sources == ["https://a.example", "https://b.example"]
        assert result.response.startswith(
            "Based on our information (Sources: https://a.example, https://b.example): "
        )

    def test_only_top_three_documents_are_used(self, synthesizer):
        candidates = [
            candidate("Nothing relevant is written in this one.", doc_id=str(i)) for i in range(3)
        ] + [candidate("Fees are listed on the portal page.", doc_id="4")]
        result = synthesizer.synthesize("fees", candidates)
        assert result.origin is AnswerOrigin.FIRST_SENTENCE
        assert result.response == "Based on our information: Nothing relevant is written in this one."

    def test_short_sentences_force_first_sentence_fallback(self, synthesizer):
        result = synthesizer.synthesize("maybe okay", [candidate("Yes. No. Maybe. OK.")])
        assert result.response == "Based on our information: Yes."
        assert result.origin is AnswerOrigin.FIRST_SENTENCE
        assert result.candidates_used == 1

    def test_blank_top_document_uses_unknown(self, synthesizer):
        result = synthesizer.synthesize("fees", [candidate(". . .")])
        assert result.response in DEFAULT_UNKNOWNS
