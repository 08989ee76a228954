"""
Chat orchestration across the three answer generators.

The UI picks a strategy per request (or inherits the configured default):
- faq_keyword: FAQ matcher with keyword fallbacks.
- knowledge_rag: knowledge-store retrieval with confidence and sources.
- context_dispatch: simulated Granite backend fed a context built from the
  catalog titles the query retrieves.
A backend failure is replaced with a fixed apology; there is no retry.
"""

from __future__ import annotations

import asyncio
import time
from typing import Iterable, Optional

from config.settings import Settings
from knowledge import templates
from knowledge.faqs import SAMPLE_FAQS
from knowledge.store import KnowledgeStore, default_store
from models.chat import ChatReply, ChatRequest, Strategy
from models.generation import GenerationParameters, GenerationRequest
from models.knowledge import FAQEntry
from services.generation_service import GraniteGenerationService
from services.rag_service import RAGService
from services.synthesis_service import generate_faq_response
from utils.error_handling import AppError
from utils.logging_config import get_logger

logger = get_logger(__name__)


class ChatService:
    """Route a chat request to the selected generator."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[KnowledgeStore] = None,
        faqs: Iterable[FAQEntry] = SAMPLE_FAQS,
        rag: Optional[RAGService] = None,
        generator: Optional[GraniteGenerationService] = None,
    ) -> None:
        self.settings = settings or Settings.from_environment()
        self.store = store or default_store()
        self.faqs = tuple(faqs)
        self.rag = rag or RAGService(self.store, self.settings)
        self.generator = generator or GraniteGenerationService(
            latency_seconds=self.settings.generation_latency_seconds
        )

    async def reply(self, request: ChatRequest) -> ChatReply:
        strategy = request.strategy or Strategy(self.settings.default_strategy)
        start = time.perf_counter()
        try:
            if strategy == Strategy.FAQ_KEYWORD:
                reply = await self._faq_reply(request)
            elif strategy == Strategy.KNOWLEDGE_RAG:
                reply = await self._rag_reply(request)
            else:
                reply = await self._context_dispatch_reply(request)
        except AppError as exc:
            logger.warning(
                "Answer generation failed; substituting apology",
                extra={"strategy": strategy.value, "error": str(exc)},
            )
            return ChatReply(answer=templates.APOLOGY_RESPONSE, strategy=strategy)

        logger.info(
            "Chat reply ready",
            extra={
                "strategy": strategy.value,
                "confidence": reply.confidence,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return reply

    def build_context(self, query: str) -> str:
        """One "category: title" line per retrieved entry, lowercased."""
        ranked = self.rag.retrieve(query)
        return "\n".join(
            f"{item.entry.category.value}: {item.entry.title.lower()}" for item in ranked
        )

    async def _faq_reply(self, request: ChatRequest) -> ChatReply:
        await asyncio.sleep(self.settings.faq_latency_seconds)
        answer = generate_faq_response(
            request.query,
            self.faqs,
            min_token_length=self.settings.faq_min_token_length,
            threshold=self.settings.faq_score_threshold,
        )
        return ChatReply(answer=answer, strategy=Strategy.FAQ_KEYWORD)

    async def _rag_reply(self, request: ChatRequest) -> ChatReply:
        result = await self.rag.generate_response(request.query)
        return ChatReply(
            answer=self.rag.render(result),
            strategy=Strategy.KNOWLEDGE_RAG,
            sources=result.sources,
            confidence=result.confidence,
        )

    async def _context_dispatch_reply(self, request: ChatRequest) -> ChatReply:
        context = request.context
        if context is None:
            context = self.build_context(request.query)
        response = await self.generator.generate(
            GenerationRequest(
                input=request.query,
                context=context,
                parameters=GenerationParameters(),
            )
        )
        return ChatReply(answer=response.generated_text, strategy=Strategy.CONTEXT_DISPATCH)
