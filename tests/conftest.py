"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add src and the project root (for evals) to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / "src"))

from faq_matcher.matchers.similarity import IntentMatcher  # noqa: E402
from faq_matcher.models.intent import Intent  # noqa: E402
from faq_matcher.storage.intent_catalog import IntentCatalog  # noqa: E402


@pytest.fixture(scope="session")
def project_root_path() -> Path:
    """Get the project root directory."""
    return project_root


@pytest.fixture(scope="session")
def catalog() -> IntentCatalog:
    """The packaged portfolio FAQ catalog."""
    return IntentCatalog.load_default()


@pytest.fixture
def matcher() -> IntentMatcher:
    """Matcher with the built-in synonyms and boost rules."""
    return IntentMatcher()


@pytest.fixture
def shop_intents() -> list[Intent]:
    """Small catalog whose utterances and tags do not collide."""
    return [
        Intent(
            id="greeting",
            title="Greeting",
            utterances=("hello there", "good morning"),
            tags=("hello", "morning"),
            answer="Hi!",
        ),
        Intent(
            id="pricing",
            title="Pricing",
            utterances=("how much does it cost", "pricing plans"),
            tags=("price", "cost", "plans"),
            answer="Plans start at $10.",
        ),
        Intent(
            id="hours",
            title="Opening hours",
            utterances=("opening hours", "when are you open"),
            tags=("hours", "open"),
            answer="We are open 9-5.",
        ),
    ]


@pytest.fixture
def sample_catalog_data() -> dict:
    """Catalog data in the on-disk JSON layout."""
    return {
        "intents": [
            {
                "id": "greeting",
                "title": "Greeting",
                "utterances": ["hello there"],
                "tags": ["hello"],
                "answer": "Hi!",
            },
            {
                "id": "pricing",
                "title": "Pricing",
                "utterances": ["pricing plans"],
                "tags": ["price", "plans"],
                "answer": "Plans start at $10.",
                "links": [{"label": "Plans", "href": "#plans", "section_id": "plans"}],
            },
        ],
        "synonyms": {"cost": ["price"]},
        "boost_rules": [
            {"trigger_substrings": ["$"], "intent_id": "pricing", "boost": 0.2},
            {"trigger_substrings": ["hi"], "intent_id": "greeting", "boost": 0.4},
        ],
        "quick_replies": [{"intent_id": "pricing", "label": "Prices"}],
    }
