"""Intent matching layer - rule-based classification."""

from faq_matcher.matchers.normalizer import normalize_text
from faq_matcher.matchers.similarity import DEFAULT_THRESHOLD, IntentMatcher, match_intent
from faq_matcher.matchers.synonyms import DEFAULT_BOOST_RULES, DEFAULT_SYNONYMS, SynonymExpander

__all__ = [
    "DEFAULT_BOOST_RULES",
    "DEFAULT_SYNONYMS",
    "DEFAULT_THRESHOLD",
    "IntentMatcher",
    "SynonymExpander",
    "match_intent",
    "normalize_text",
]
