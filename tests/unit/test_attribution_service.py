"""Confidence and source attribution tests."""

import pytest

from config.settings import Settings
from knowledge import templates
from models.knowledge import SynthesizedAnswer
from services.attribution_service import attribute, compute_confidence


class TestComputeConfidence:
    @pytest.mark.parametrize(
        "documents,expected",
        [(0, 0.3), (1, 0.65), (2, 0.8), (3, 0.9), (4, 0.9)],
    )
    def test_formula(self, documents, expected):
        assert compute_confidence(documents) == pytest.approx(expected)

    def test_monotonic_non_decreasing(self):
        values = [compute_confidence(n) for n in range(1, 4)]
        assert values == sorted(values)
        assert max(values) <= 0.9

    def test_constants_are_overridable(self):
        settings = Settings(confidence_base=0.2, confidence_per_document=0.1, confidence_cap=0.95)
        assert compute_confidence(2, settings) == pytest.approx(0.4)


class TestAttribute:
    def test_sources_trailer_keeps_rank_order(self):
        answer = SynthesizedAnswer(answer="Body", sources=["B title", "A title"], confidence=0.8)
        assert attribute(answer) == "Body\n\n*Sources: B title, A title*"

    def test_low_confidence_adds_disclaimer(self):
        answer = SynthesizedAnswer(answer="Body", sources=["Only"], confidence=0.65)
        text = attribute(answer)
        assert text.startswith("Body\n\n*Sources: Only*")
        assert text.endswith(templates.LOW_CONFIDENCE_DISCLAIMER)

    def test_default_response_has_disclaimer_but_no_sources(self):
        answer = SynthesizedAnswer(answer="Help", sources=[], confidence=0.3)
        assert attribute(answer) == "Help" + templates.LOW_CONFIDENCE_DISCLAIMER

    def test_threshold_is_exclusive(self):
        answer = SynthesizedAnswer(answer="Body", sources=[], confidence=0.7)
        assert attribute(answer) == "Body"
