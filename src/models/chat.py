"""Chat payloads exchanged with the UI layer."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Strategy(str, Enum):
    """Which answer generator serves a chat request."""

    FAQ_KEYWORD = "faq_keyword"
    KNOWLEDGE_RAG = "knowledge_rag"
    CONTEXT_DISPATCH = "context_dispatch"


class MessageType(str, Enum):
    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """One chat bubble as rendered by the widget."""

    id: str
    type: MessageType
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ChatRequest(BaseModel):
    """Incoming question. Empty queries are allowed and get the help text."""

    query: str
    strategy: Optional[Strategy] = None
    context: Optional[str] = None


class ChatReply(BaseModel):
    """Answer text plus attribution metadata for the chosen strategy."""

    answer: str
    strategy: Strategy
    sources: List[str] = Field(default_factory=list)
    confidence: Optional[float] = Field(default=None, ge=0, le=1)
