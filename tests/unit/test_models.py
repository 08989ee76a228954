"""
Pydantic model validation tests.

Ensures all models validate correctly and reject invalid data.

Run with: pytest tests/unit/test_models.py -v
"""

import sys
from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

# Add src to path to mirror the deployed code root
SRC_PATH = Path(__file__).parent.parent.parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


def _entry(**overrides):
    from models.knowledge import Category, KnowledgeEntry

    fields = {
        "id": "x1",
        "title": "Housing Guide",
        "content": "Dorm assignments are emailed in July.",
        "category": Category.CAMPUS,
        "tags": ("housing",),
        "last_updated": date(2024, 2, 1),
    }
    fields.update(overrides)
    return KnowledgeEntry(**fields)


class TestKnowledgeEntry:
    """Test KnowledgeEntry validation."""

    def test_valid_entry(self):
        """Valid entry should pass validation."""
        entry = _entry()
        assert entry.id == "x1"
        assert entry.category.value == "campus"

    @pytest.mark.parametrize("field", ["id", "title", "content"])
    def test_entry_rejects_blank_required_fields(self, field):
        """Blank id/title/content should be rejected."""
        with pytest.raises(ValidationError):
            _entry(**{field: "   "})

    def test_entry_rejects_unknown_category(self):
        """Category must be one of the fixed enumeration."""
        with pytest.raises(ValidationError):
            _entry(category="athletics")

    def test_entry_is_immutable(self):
        """Entries are frozen after construction."""
        entry = _entry()
        with pytest.raises(ValidationError):
            entry.title = "Changed"

    def test_searchable_text_is_lowercased(self):
        """Title, content and tags are joined and lowercased."""
        text = _entry(tags=("Residence Hall",)).searchable_text()
        assert text.startswith("housing guide dorm assignments")
        assert text.endswith("residence hall")


class TestSynthesizedAnswer:
    """Test SynthesizedAnswer model."""

    def test_confidence_bounds(self):
        """Confidence must stay within [0, 1]."""
        from models.knowledge import SynthesizedAnswer

        with pytest.raises(ValidationError):
            SynthesizedAnswer(answer="x", sources=[], confidence=1.2)

    def test_sources_default_empty(self):
        from models.knowledge import SynthesizedAnswer

        answer = SynthesizedAnswer(answer="x", confidence=0.3)
        assert answer.sources == []


class TestGenerationModels:
    """Test generation request/response models."""

    def test_request_defaults(self):
        """Context and parameters are optional."""
        from models.generation import GenerationRequest

        request = GenerationRequest(input="hello")
        assert request.context is None
        assert request.parameters is None

    def test_parameter_defaults(self):
        from models.generation import GenerationParameters

        params = GenerationParameters()
        assert params.temperature == 0.7
        assert params.max_new_tokens == 300
        assert params.min_new_tokens == 50
        assert params.repetition_penalty == 1.05

    def test_parameters_reject_non_positive_max_tokens(self):
        from models.generation import GenerationParameters

        with pytest.raises(ValidationError):
            GenerationParameters(max_new_tokens=0)

    def test_config_defaults(self):
        from models.generation import GenerationConfig

        config = GenerationConfig()
        assert config.model_id == "ibm/granite-13b-chat-v2"
        assert config.max_tokens == 500


class TestChatModels:
    """Test chat payload models."""

    def test_chat_request_accepts_strategy_string(self):
        from models.chat import ChatRequest, Strategy

        request = ChatRequest(query="fees", strategy="faq_keyword")
        assert request.strategy == Strategy.FAQ_KEYWORD

    def test_chat_request_requires_query(self):
        from models.chat import ChatRequest

        with pytest.raises(ValidationError):
            ChatRequest()

    def test_chat_request_rejects_unknown_strategy(self):
        from models.chat import ChatRequest

        with pytest.raises(ValidationError):
            ChatRequest(query="fees", strategy="llm")

    def test_message_timestamp_defaults(self):
        from models.chat import Message, MessageType

        message = Message(id="1", type=MessageType.BOT, content="hi")
        assert message.timestamp is not None


class TestEnums:
    """Test enum values."""

    def test_category_enum_values(self):
        """Category enum should have expected values (lowercase)."""
        from models.knowledge import Category

        assert [c.value for c in Category] == [
            "requirements",
            "deadlines",
            "fees",
            "programs",
            "campus",
            "support",
        ]

    def test_strategy_enum_values(self):
        from models.chat import Strategy

        assert Strategy.FAQ_KEYWORD.value == "faq_keyword"
        assert Strategy.KNOWLEDGE_RAG.value == "knowledge_rag"
        assert Strategy.CONTEXT_DISPATCH.value == "context_dispatch"
