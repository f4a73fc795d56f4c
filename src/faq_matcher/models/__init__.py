"""Data models for the FAQ matcher."""

from faq_matcher.models.intent import Intent, IntentLink
from faq_matcher.models.response import NO_MATCH, IntentScore, MatchingResult, NoMatch
from faq_matcher.models.synonyms import BoostRule, SynonymTable

__all__ = [
    "BoostRule",
    "Intent",
    "IntentLink",
    "IntentScore",
    "MatchingResult",
    "NO_MATCH",
    "NoMatch",
    "SynonymTable",
]
