"""
Simulated Granite text generation backend.

Stands in for a hosted generation API: it waits out a fixed latency and then
picks a hand-written paragraph from the request context. Nothing leaves the
process.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from knowledge import templates
from models.generation import GenerationConfig, GenerationRequest, GenerationResponse
from utils.error_handling import GenerationError
from utils.logging_config import get_logger
from utils.text import contains_keywords, count_tokens, normalize_text

logger = get_logger(__name__)

GRADUATE_KEYWORDS = ("graduate", "master", "phd")

# Context markers checked in order; matching is case-sensitive on the context.
CONTEXT_TOPICS = (
    ("requirements", ("admission requirements",)),
    ("deadlines", ("deadlines",)),
    ("fees", ("fees", "tuition")),
    ("programs", ("programs", "courses")),
)


class GraniteGenerationService:
    """Context-dispatch generator with the contract of a remote text API."""

    def __init__(
        self,
        config: Optional[GenerationConfig] = None,
        latency_seconds: float = 1.2,
    ) -> None:
        self.config = config or GenerationConfig()
        self.latency_seconds = latency_seconds

    async def generate(
        self, request: Union[GenerationRequest, Dict[str, Any]]
    ) -> GenerationResponse:
        """
        Resolve a generation request after the simulated network delay.

        Raises GenerationError for requests the backend cannot serve.
        """
        try:
            parsed = GenerationRequest.model_validate(request)
        except PydanticValidationError as exc:
            logger.warning("Rejected generation request", extra={"error": str(exc)})
            raise GenerationError("Failed to generate response from IBM Granite AI") from exc

        await asyncio.sleep(self.latency_seconds)

        text = self.simulate(parsed)
        response = GenerationResponse(
            generated_text=text,
            input_token_count=count_tokens(parsed.input),
            generated_token_count=count_tokens(text),
            stop_reason="eos_token",
        )
        logger.info(
            "Generation complete",
            extra={
                "model_id": self.config.model_id,
                "input_tokens": response.input_token_count,
                "generated_tokens": response.generated_token_count,
            },
        )
        return response

    def simulate(self, request: GenerationRequest) -> str:
        """Pick the canned paragraph for a request."""
        topic = self.dispatch_topic(request.context or "")
        if topic == "requirements":
            variant = (
                templates.GRADUATE
                if contains_keywords(normalize_text(request.input), GRADUATE_KEYWORDS)
                else templates.UNDERGRADUATE
            )
            return templates.GENERATION_TEMPLATES[(topic, variant)]
        return templates.GENERATION_TEMPLATES[(topic, templates.DEFAULT)]

    @staticmethod
    def dispatch_topic(context: str) -> str:
        for topic, markers in CONTEXT_TOPICS:
            if any(marker in context for marker in markers):
                return topic
        return "general"
