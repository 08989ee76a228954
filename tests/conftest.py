"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from services import matcher_service` to work
when running tests, mirroring deployment where src/ is the code root.
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add src/ to sys.path if missing."""
    repo_root = Path(__file__).resolve().parents[1]
    src_str = str(repo_root / "src")
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Simulated latency is irrelevant to behaviour; keep the suite fast.
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("RAG_LATENCY_SECONDS", "0")
os.environ.setdefault("GENERATION_LATENCY_SECONDS", "0")
os.environ.setdefault("FAQ_LATENCY_SECONDS", "0")


@pytest.fixture
def fast_settings():
    """Default thresholds with no simulated latency."""
    from config.settings import Settings

    return Settings(
        rag_latency_seconds=0,
        generation_latency_seconds=0,
        faq_latency_seconds=0,
    )


@pytest.fixture
def store():
    from knowledge.store import default_store

    return default_store()
