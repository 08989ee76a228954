"""
Runtime settings for the admissions assistant.

Every threshold the matchers and the confidence layer use is a field here so
that a deployment can tune it through environment variables without touching
the services.
"""

from dataclasses import dataclass
import os
from typing import Callable, TypeVar

from utils.error_handling import ValidationError

T = TypeVar("T")

STRATEGIES = ("faq_keyword", "knowledge_rag", "context_dispatch")


def _env(name: str, default: T, cast: Callable[[str], T]) -> T:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValidationError(f"Invalid value for {name}: {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    """Application settings with the defaults of the reference chat widget."""

    # Environment
    environment: str = "dev"
    model_id: str = "ibm/granite-13b-chat-v2"
    default_strategy: str = "knowledge_rag"

    # Matching
    rag_min_token_length: int = 3  # knowledge store tokens need at least 3 chars
    faq_min_token_length: int = 4  # FAQ tokens need at least 4 chars
    faq_score_threshold: int = 2  # FAQ match must score strictly above this
    rag_top_n: int = 3

    # Confidence
    confidence_base: float = 0.5
    confidence_per_document: float = 0.15
    confidence_cap: float = 0.9
    confidence_default: float = 0.3
    disclaimer_threshold: float = 0.7

    # Simulated latency (seconds)
    rag_latency_seconds: float = 1.0
    generation_latency_seconds: float = 1.2
    faq_latency_seconds: float = 1.5

    def __post_init__(self) -> None:
        if self.default_strategy not in STRATEGIES:
            raise ValidationError(f"Unknown strategy: {self.default_strategy}")
        if self.rag_min_token_length < 1 or self.faq_min_token_length < 1:
            raise ValidationError("Minimum token length must be positive")
        if self.rag_top_n < 1:
            raise ValidationError("rag_top_n must be at least 1")
        for name in ("confidence_cap", "confidence_default", "disclaimer_threshold"):
            if not 0 <= getattr(self, name) <= 1:
                raise ValidationError(f"{name} must be between 0 and 1")

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            model_id=os.environ.get("MODEL_ID", cls.model_id),
            default_strategy=os.environ.get("DEFAULT_STRATEGY", cls.default_strategy),
            rag_min_token_length=_env("RAG_MIN_TOKEN_LENGTH", cls.rag_min_token_length, int),
            faq_min_token_length=_env("FAQ_MIN_TOKEN_LENGTH", cls.faq_min_token_length, int),
            faq_score_threshold=_env("FAQ_SCORE_THRESHOLD", cls.faq_score_threshold, int),
            rag_top_n=_env("RAG_TOP_N", cls.rag_top_n, int),
            confidence_base=_env("CONFIDENCE_BASE", cls.confidence_base, float),
            confidence_per_document=_env(
                "CONFIDENCE_PER_DOCUMENT", cls.confidence_per_document, float
            ),
            confidence_cap=_env("CONFIDENCE_CAP", cls.confidence_cap, float),
            confidence_default=_env("CONFIDENCE_DEFAULT", cls.confidence_default, float),
            disclaimer_threshold=_env(
                "DISCLAIMER_THRESHOLD", cls.disclaimer_threshold, float
            ),
            rag_latency_seconds=_env("RAG_LATENCY_SECONDS", cls.rag_latency_seconds, float),
            generation_latency_seconds=_env(
                "GENERATION_LATENCY_SECONDS", cls.generation_latency_seconds, float
            ),
            faq_latency_seconds=_env("FAQ_LATENCY_SECONDS", cls.faq_latency_seconds, float),
        )
