"""Knowledge catalog models shared by the matchers and synthesizers."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    """Topical buckets used to organize the catalog and route synthesis."""

    REQUIREMENTS = "requirements"
    DEADLINES = "deadlines"
    FEES = "fees"
    PROGRAMS = "programs"
    CAMPUS = "campus"
    SUPPORT = "support"


class KnowledgeEntry(BaseModel):
    """One static document of the admissions catalog."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    content: str
    category: Category
    tags: Tuple[str, ...] = ()
    last_updated: date

    @field_validator("id", "title", "content")
    @classmethod
    def validate_required(cls, value: str) -> str:
        """Seed entries without an id, title or body are a data bug."""
        if not (value or "").strip():
            raise ValueError("id, title and content must be provided")
        return value

    def searchable_text(self) -> str:
        """Title, body and tags lowercased into a single haystack."""
        return f"{self.title} {self.content} {' '.join(self.tags)}".lower()


class FAQEntry(BaseModel):
    """Question/answer pair used by the keyword FAQ responder."""

    model_config = ConfigDict(frozen=True)

    question: str
    answer: str
    category: str


class RankedEntry(BaseModel):
    """Knowledge entry paired with the number of query tokens it contains."""

    model_config = ConfigDict(frozen=True)

    entry: KnowledgeEntry
    score: int = Field(ge=0)


class FAQMatch(BaseModel):
    """Winning FAQ entry and its weighted score."""

    model_config = ConfigDict(frozen=True)

    entry: FAQEntry
    score: int = Field(ge=0)


class SynthesizedAnswer(BaseModel):
    """Answer text with the titles it was built from and a heuristic confidence."""

    answer: str
    sources: List[str] = Field(default_factory=list)
    confidence: float = Field(ge=0, le=1)
