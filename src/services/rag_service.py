"""
Knowledge-store retrieval-augmented responder.

Ranks the catalog, fills the category template and scores confidence. The
service holds no per-query state; construct one per store and share it.
"""

from __future__ import annotations

import asyncio
import time
from typing import List, Optional

from config.settings import Settings
from knowledge.store import KnowledgeStore, default_store
from models.knowledge import RankedEntry, SynthesizedAnswer
from services.attribution_service import attribute, compute_confidence
from services.matcher_service import rank
from services.synthesis_service import synthesize
from utils.logging_config import get_logger

logger = get_logger(__name__)


class RAGService:
    """Retrieve, synthesize and attribute answers from a KnowledgeStore."""

    def __init__(
        self,
        store: Optional[KnowledgeStore] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.store = store or default_store()
        self.settings = settings or Settings()

    def retrieve(self, query: str) -> List[RankedEntry]:
        """Top-ranked entries for a query; empty when nothing matches."""
        return rank(
            query,
            self.store.entries(),
            min_token_length=self.settings.rag_min_token_length,
            top_n=self.settings.rag_top_n,
        )

    def answer(self, query: str) -> SynthesizedAnswer:
        """Synchronous retrieval + synthesis with confidence and sources."""
        start = time.perf_counter()
        ranked = self.retrieve(query)
        result = SynthesizedAnswer(
            answer=synthesize(query, ranked),
            sources=[item.entry.title for item in ranked],
            confidence=compute_confidence(len(ranked), self.settings),
        )
        logger.info(
            "Knowledge answer synthesized",
            extra={
                "query_length": len(query),
                "results_count": len(ranked),
                "confidence": result.confidence,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return result

    async def generate_response(self, query: str) -> SynthesizedAnswer:
        """answer() behind the simulated backend latency."""
        await asyncio.sleep(self.settings.rag_latency_seconds)
        return self.answer(query)

    def render(self, result: SynthesizedAnswer) -> str:
        """Final chat text: answer plus sources trailer and disclaimer."""
        return attribute(result, self.settings)
