"""
Knowledge-store RAG service tests.

Run with: pytest tests/unit/test_rag_service.py -v
"""

import asyncio

import pytest

from knowledge import templates
from services.rag_service import RAGService


@pytest.fixture
def rag(store, fast_settings):
    return RAGService(store, fast_settings)


class TestRAGService:
    """Retrieval + synthesis + confidence."""

    def test_no_match_uses_default_response(self, rag):
        result = rag.answer("asdkfj qwerty")
        assert result.answer == templates.RAG_DEFAULT_RESPONSE
        assert result.sources == []
        assert result.confidence == pytest.approx(0.3)

    def test_empty_query_degrades_gracefully(self, rag):
        result = rag.answer("")
        assert result.confidence == pytest.approx(0.3)

    def test_sources_follow_rank_order(self, rag):
        result = rag.answer("Tuition and Fees Structure")
        assert result.sources[0] == "Tuition and Fees Structure"
        assert len(result.sources) <= 3

    def test_confidence_tracks_documents_used(self, rag):
        result = rag.answer("structure")
        assert result.sources == ["Tuition and Fees Structure"]
        assert result.confidence == pytest.approx(0.65)

    def test_render_appends_sources_and_disclaimer(self, rag):
        text = rag.render(rag.answer("structure"))
        assert "*Sources: Tuition and Fees Structure*" in text
        assert text.endswith(templates.LOW_CONFIDENCE_DISCLAIMER)

    def test_render_default_response(self, rag):
        text = rag.render(rag.answer("asdkfj qwerty"))
        assert "*Sources:" not in text
        assert text.endswith(templates.LOW_CONFIDENCE_DISCLAIMER)

    def test_generate_response_matches_answer(self, rag):
        query = "graduate admission requirements GPA GRE"
        result = asyncio.run(rag.generate_response(query))
        assert result == rag.answer(query)
        assert "3.2" in result.answer

    def test_top_n_is_configurable(self, store):
        from config.settings import Settings

        rag = RAGService(store, Settings(rag_top_n=1, rag_latency_seconds=0))
        result = rag.answer("What are the admission requirements for undergraduate programs?")
        assert len(result.sources) == 1
        assert result.confidence == pytest.approx(0.65)
