"""
Chat handlers for POST /chat and GET /greeting.

The widget posts the user's text and renders the returned bot message; all
answer logic lives in ChatService.
"""

from __future__ import annotations

import asyncio
import json
import uuid
from typing import Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from knowledge.templates import GREETING
from models.chat import ChatRequest, Message, MessageType
from services.chat_service import ChatService
from utils.error_handling import ValidationError, to_response
from utils.logging_config import get_logger

logger = get_logger(__name__)
_chat_service: Optional[ChatService] = None


def _get_chat_service() -> ChatService:
    """Build the service on first use so settings come from the live environment."""
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatService()
    return _chat_service


def _json(status: int, body: Dict) -> Dict:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def lambda_handler(event, context) -> Dict:
    """Answer one chat message with the requested (or default) strategy."""
    correlation_id = str(uuid.uuid4())
    try:
        payload_body = event.get("body")
        payload = json.loads(payload_body) if payload_body else event
        request = ChatRequest.model_validate(payload)
    except (json.JSONDecodeError, PydanticValidationError) as exc:
        logger.warning(
            "Rejected chat payload",
            extra={"correlation_id": correlation_id, "error": str(exc)},
        )
        return to_response(ValidationError("Chat request must include a query string"))

    reply = asyncio.run(_get_chat_service().reply(request))
    message = Message(id=correlation_id, type=MessageType.BOT, content=reply.answer)

    logger.info(
        "Chat message answered",
        extra={"correlation_id": correlation_id, "strategy": reply.strategy.value},
    )
    return _json(
        200,
        {
            "message": message.model_dump(mode="json"),
            "strategy": reply.strategy.value,
            "sources": reply.sources,
            "confidence": reply.confidence,
            "correlation_id": correlation_id,
        },
    )


def greeting_handler(event, context) -> Dict:
    """Opening bot message shown before the user types anything."""
    message = Message(id=str(uuid.uuid4()), type=MessageType.BOT, content=GREETING)
    return _json(200, {"message": message.model_dump(mode="json")})
