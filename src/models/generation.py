"""Request/response shapes of the simulated text generation backend."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class GenerationConfig(BaseModel):
    """Connection settings a real deployment would need; unused by the simulation."""

    api_key: str = "demo-api-key"
    endpoint: str = "https://us-south.ml.cloud.ibm.com/ml/v1-beta/generation/text"
    model_id: str = "ibm/granite-13b-chat-v2"
    temperature: float = Field(default=0.7, ge=0, le=2)
    max_tokens: int = Field(default=500, gt=0)


class GenerationParameters(BaseModel):
    """Decoding parameters forwarded with every request."""

    temperature: float = Field(default=0.7, ge=0, le=2)
    max_new_tokens: int = Field(default=300, gt=0)
    min_new_tokens: int = Field(default=50, ge=0)
    repetition_penalty: float = Field(default=1.05, gt=0)


class GenerationRequest(BaseModel):
    """Input text plus optional retrieval context."""

    input: str
    context: Optional[str] = None
    parameters: Optional[GenerationParameters] = None


class GenerationResponse(BaseModel):
    """Generated text and whitespace token counts."""

    generated_text: str
    input_token_count: int = Field(ge=0)
    generated_token_count: int = Field(ge=0)
    stop_reason: str = "eos_token"
