"""Pydantic models for the knowledge catalog, generation backend and chat payloads."""

from models.chat import ChatReply, ChatRequest, Message, MessageType, Strategy  # noqa: F401
from models.generation import (  # noqa: F401
    GenerationConfig,
    GenerationParameters,
    GenerationRequest,
    GenerationResponse,
)
from models.knowledge import (  # noqa: F401
    Category,
    FAQEntry,
    FAQMatch,
    KnowledgeEntry,
    RankedEntry,
    SynthesizedAnswer,
)
