"""Rule-based FAQ intent matching."""

from faq_matcher.matchers.similarity import DEFAULT_THRESHOLD, IntentMatcher, match_intent
from faq_matcher.models import NO_MATCH, BoostRule, Intent, IntentLink, NoMatch, SynonymTable
from faq_matcher.storage.intent_catalog import IntentCatalog

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_THRESHOLD",
    "NO_MATCH",
    "BoostRule",
    "Intent",
    "IntentCatalog",
    "IntentLink",
    "IntentMatcher",
    "NoMatch",
    "SynonymTable",
    "match_intent",
]
