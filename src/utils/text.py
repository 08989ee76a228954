"""Plain-text helpers shared by the matchers and synthesizers."""

import re
from functools import lru_cache
from typing import Iterable, List, Pattern, Tuple


def normalize_text(text: str) -> str:
    return (text or "").lower()


def tokenize(text: str, min_length: int) -> List[str]:
    """Lowercase, split on whitespace and drop tokens shorter than min_length."""
    return [token for token in normalize_text(text).split() if len(token) >= min_length]


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """True when any keyword occurs anywhere in text ("date" in "candidates")."""
    return any(keyword in text for keyword in keywords)


@lru_cache(maxsize=64)
def _keyword_pattern(keywords: Tuple[str, ...]) -> Pattern[str]:
    alternatives = "|".join(re.escape(keyword) for keyword in keywords)
    return re.compile(rf"\b(?:{alternatives})")


def contains_keywords(text: str, keywords: Iterable[str]) -> bool:
    """
    True when any keyword starts a word of text.

    Used for the graduate tier check: "graduate" does not match inside
    "undergraduate".
    """
    keywords = tuple(keywords)
    if not keywords:
        return False
    return _keyword_pattern(keywords).search(text) is not None


def count_tokens(text: str) -> int:
    return len(text.split())
