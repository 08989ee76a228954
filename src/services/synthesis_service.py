"""
Template-based answer synthesis.

Two independent responders:
- synthesize() builds the knowledge-store answer from ranked entries.
- generate_faq_response() answers from the FAQ set and falls back to
  keyword-triggered paragraphs when no FAQ is a confident match.
They share no templates; a query can legitimately get different wording from
each.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from knowledge import templates
from knowledge.faqs import SAMPLE_FAQS
from models.knowledge import Category, FAQEntry, RankedEntry
from services.matcher_service import find_best_faq_match
from utils.text import contains_any, contains_keywords, normalize_text

# Substring keywords, evaluated in order; the first category whose keywords
# occur in the query and whose entry was retrieved wins.
CATEGORY_KEYWORDS: Tuple[Tuple[Category, Tuple[str, ...]], ...] = (
    (Category.REQUIREMENTS, ("requirement", "requirements", "need", "eligibility", "qualify")),
    (Category.DEADLINES, ("deadline", "due", "when", "date", "apply")),
    (
        Category.FEES,
        ("fee", "cost", "tuition", "price", "money", "financial", "aid", "scholarship"),
    ),
    (Category.PROGRAMS, ("program", "major", "course", "degree", "study", "school")),
    (
        Category.CAMPUS,
        ("campus", "life", "facility", "service", "support", "housing", "dorm"),
    ),
)

# Matched at word starts so "undergraduate" stays in the undergraduate tier.
GRADUATE_KEYWORDS = {
    Category.REQUIREMENTS: ("graduate", "master", "phd", "mba"),
    Category.DEADLINES: ("graduate", "master", "phd"),
    Category.FEES: ("graduate", "master", "mba", "phd"),
}
ENGINEERING_KEYWORDS = ("engineering", "computer", "technology")
BUSINESS_KEYWORDS = ("business", "mba", "finance", "marketing")


def select_variant(category: Category, query: str) -> str:
    """Pick the template variant of a category for a lowercased query."""
    if category in GRADUATE_KEYWORDS:
        if contains_keywords(query, GRADUATE_KEYWORDS[category]):
            return templates.GRADUATE
        return templates.UNDERGRADUATE
    if category == Category.PROGRAMS:
        if contains_any(query, ENGINEERING_KEYWORDS):
            return templates.ENGINEERING
        if contains_any(query, BUSINESS_KEYWORDS):
            return templates.BUSINESS
        return templates.OVERVIEW
    return templates.DEFAULT


def extract_summary(content: str) -> str:
    """
    First three period-delimited fragments plus a follow-up prompt.

    Splitting on "." also splits decimals such as "3.0", so summaries of
    numeric content can end mid-number.
    """
    fragments = content.split(".")[:3]
    return ".".join(fragments) + "." + templates.SUMMARY_PROMPT


def synthesize(query: str, ranked: Sequence[RankedEntry]) -> str:
    """Answer text for a query given its ranked knowledge entries."""
    if not ranked:
        return templates.RAG_DEFAULT_RESPONSE

    query_lower = normalize_text(query)
    retrieved = {item.entry.category for item in ranked}
    for category, keywords in CATEGORY_KEYWORDS:
        if category in retrieved and contains_any(query_lower, keywords):
            variant = select_variant(category, query_lower)
            return templates.RAG_TEMPLATES[(category, variant)]

    return extract_summary(ranked[0].entry.content)


def generate_fallback_response(query: str) -> str:
    """Keyword-triggered canned paragraph, or the generic help text."""
    query_lower = normalize_text(query)
    for triggers, text in templates.FAQ_FALLBACKS:
        if contains_any(query_lower, triggers):
            return text
    return templates.FAQ_HELP_RESPONSE


def generate_faq_response(
    query: str,
    faqs: Iterable[FAQEntry] = SAMPLE_FAQS,
    min_token_length: int = 4,
    threshold: int = 2,
) -> str:
    """FAQ answer with a follow-up question, else the keyword fallback."""
    match = find_best_faq_match(query, faqs, min_token_length, threshold)
    if match:
        return templates.FAQ_FOLLOW_UP.format(
            answer=match.entry.answer,
            category=match.entry.category.lower(),
        )
    return generate_fallback_response(query)
