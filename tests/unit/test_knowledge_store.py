"""Knowledge catalog and FAQ seed data tests."""

from datetime import date

import pytest

from knowledge.faqs import SAMPLE_FAQS
from knowledge.store import KNOWLEDGE_BASE, KnowledgeStore, default_store
from models.knowledge import Category, KnowledgeEntry
from utils.error_handling import ValidationError


class TestDefaultStore:
    """The seed catalog is complete and well formed."""

    def test_store_is_not_empty(self, store):
        assert len(store) == 6

    def test_every_entry_has_required_fields(self, store):
        for entry in store.entries():
            assert entry.id
            assert entry.title
            assert entry.content
            assert isinstance(entry.category, Category)

    def test_ids_are_unique(self, store):
        ids = [entry.id for entry in store]
        assert len(ids) == len(set(ids))

    def test_order_is_stable_across_calls(self, store):
        assert store.entries() == store.entries()
        assert [e.id for e in store.entries()] == ["1", "2", "3", "4", "5", "6"]

    def test_entries_are_shared_not_copied(self):
        assert default_store().entries() == KNOWLEDGE_BASE


class TestStoreLookups:
    """Read-only accessors."""

    def test_by_category(self, store):
        titles = [e.title for e in store.by_category(Category.REQUIREMENTS)]
        assert titles == [
            "Undergraduate Admission Requirements",
            "Graduate Admission Requirements",
        ]

    def test_support_category_has_no_seed_entries(self, store):
        assert store.by_category(Category.SUPPORT) == ()

    def test_duplicate_ids_rejected(self):
        entry = KnowledgeEntry(
            id="dup",
            title="A",
            content="B",
            category=Category.FEES,
            last_updated=date(2024, 1, 1),
        )
        with pytest.raises(ValidationError):
            KnowledgeStore([entry, entry])


class TestFaqSeed:
    def test_faq_categories(self):
        assert [faq.category for faq in SAMPLE_FAQS] == [
            "Eligibility",
            "Deadlines",
            "Fees",
            "Programs",
            "Financial Aid",
        ]
