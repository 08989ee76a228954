"""
Lexical matching over the knowledge catalog and the FAQ set.

Two scorers live here and they intentionally disagree on details:
- rank() counts query tokens (3+ chars) contained anywhere in an entry's
  title/content/tags and keeps every entry with a positive score.
- find_best_faq_match() weights question/answer/category hits 3/2/1 for
  tokens of 4+ chars and only accepts a winner above a fixed threshold.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from models.knowledge import FAQEntry, FAQMatch, KnowledgeEntry, RankedEntry
from utils.text import normalize_text, tokenize

QUESTION_WEIGHT = 3
ANSWER_WEIGHT = 2
CATEGORY_WEIGHT = 1


def rank(
    query: str,
    entries: Iterable[KnowledgeEntry],
    min_token_length: int = 3,
    top_n: Optional[int] = 3,
) -> List[RankedEntry]:
    """
    Score entries by substring containment of query tokens, best first.

    Ties keep catalog order (sorted() is stable), which decides the winning
    entry for ambiguous queries. Entries scoring 0 are dropped, so a query
    with no usable tokens yields an empty list.
    """
    tokens = tokenize(query, min_token_length)
    if not tokens:
        return []

    ranked: List[RankedEntry] = []
    for entry in entries:
        haystack = entry.searchable_text()
        score = sum(1 for token in tokens if token in haystack)
        if score > 0:
            ranked.append(RankedEntry(entry=entry, score=score))

    ranked = sorted(ranked, key=lambda item: item.score, reverse=True)
    if top_n is not None:
        ranked = ranked[:top_n]
    return ranked


def _overlaps(token: str, words: Sequence[str]) -> bool:
    """Bidirectional substring check against every word of a field."""
    return any(token in word or word in token for word in words)


def score_faq(query: str, faq: FAQEntry, min_token_length: int = 4) -> int:
    """Weighted score of one FAQ entry; each field counts once per token."""
    question_words = normalize_text(faq.question).split()
    answer_words = normalize_text(faq.answer).split()
    category_words = normalize_text(faq.category).split()

    score = 0
    for token in tokenize(query, min_token_length):
        if _overlaps(token, question_words):
            score += QUESTION_WEIGHT
        if _overlaps(token, answer_words):
            score += ANSWER_WEIGHT
        if _overlaps(token, category_words):
            score += CATEGORY_WEIGHT
    return score


def find_best_faq_match(
    query: str,
    faqs: Iterable[FAQEntry],
    min_token_length: int = 4,
    threshold: int = 2,
) -> Optional[FAQMatch]:
    """Return the first highest-scoring FAQ if its score exceeds threshold."""
    best: Optional[FAQEntry] = None
    highest = 0
    for faq in faqs:
        score = score_faq(query, faq, min_token_length)
        if score > highest:
            highest = score
            best = faq

    if best is None or highest <= threshold:
        return None
    return FAQMatch(entry=best, score=highest)
