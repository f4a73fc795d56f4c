"""Rule-based intent matching: utterance similarity plus keyword overlap."""

from collections.abc import Iterable, Iterator, Sequence

from faq_matcher.matchers.keyword import keyword_overlap_score, matching_keywords
from faq_matcher.matchers.normalizer import normalize_text
from faq_matcher.matchers.synonyms import DEFAULT_BOOST_RULES, SynonymExpander
from faq_matcher.matchers.utterance import utterance_match_score
from faq_matcher.models.intent import Intent
from faq_matcher.models.response import NO_MATCH, IntentScore, MatchingResult, NoMatch
from faq_matcher.models.synonyms import BoostRule, SynonymTable

DEFAULT_THRESHOLD = 0.3

UTTERANCE_WEIGHT = 0.5
KEYWORD_WEIGHT = 0.5
MULTI_KEYWORD_MIN = 2
MULTI_KEYWORD_BOOST = 0.15


class IntentMatcher:
    """
    Picks the single best FAQ intent for a free-text query.

    Each intent gets a combined score:

        utterance * 0.5 + keyword * 0.5 + synonym boost + multi-keyword boost

    The combined score is deliberately not clamped, so boosted intents can
    score above 1.0. The intent with the strictly highest score wins (ties
    go to the earliest intent in catalog order) if it reaches the threshold.

    The matcher holds only immutable configuration. Calls never mutate the
    catalog or any shared state and are safe to run concurrently.
    """

    def __init__(
        self,
        synonyms: SynonymTable | None = None,
        boost_rules: Iterable[BoostRule] | None = None,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> None:
        """
        Initialize the intent matcher.

        Args:
            synonyms: Synonym table for query expansion (built-in table if None).
            boost_rules: Targeted per-intent boosts (built-in rules if None).
            threshold: Default minimum combined score for a match.
        """
        self.expander = SynonymExpander(synonyms)
        self.boost_rules: tuple[BoostRule, ...] = (
            tuple(boost_rules) if boost_rules is not None else DEFAULT_BOOST_RULES
        )
        self.threshold = threshold

    def match(
        self,
        query: str,
        intents: Sequence[Intent],
        threshold: float | None = None,
    ) -> Intent | NoMatch:
        """
        Match a query against the intent catalog.

        Args:
            query: Raw user text. Empty or whitespace-only input is legal.
            intents: Ordered, read-only intent catalog.
            threshold: Override of the matcher's default threshold.

        Returns:
            The winning intent object from ``intents`` itself, or ``NO_MATCH``.
        """
        return self.rank(query, intents, threshold=threshold, top_k=0).outcome

    def rank(
        self,
        query: str,
        intents: Sequence[Intent],
        threshold: float | None = None,
        top_k: int | None = None,
    ) -> MatchingResult:
        """
        Score every intent and report the decision with its breakdown.

        Args:
            query: Raw user text.
            intents: Ordered, read-only intent catalog.
            threshold: Override of the matcher's default threshold.
            top_k: Number of score breakdowns to keep (all if None).

        Returns:
            MatchingResult with the winner (if any) and scores sorted best first.
        """
        threshold = self.threshold if threshold is None else threshold
        normalized = normalize_text(query) if query and query.strip() else ""
        result = MatchingResult(query=query, normalized_query=normalized, threshold=threshold)

        if not normalized:
            return result

        best_intent: Intent | None = None
        best_score = 0.0
        scores: list[IntentScore] = []

        for intent, score in self._score_all(normalized, intents):
            scores.append(score)
            if score.combined_score > best_score:
                best_score = score.combined_score
                best_intent = intent

        # Stable sort keeps catalog order among equal scores.
        scores.sort(key=lambda s: s.combined_score, reverse=True)
        result.scores = scores if top_k is None else scores[:top_k]
        result.best_score = best_score
        if best_intent is not None and best_score >= threshold:
            result.intent = best_intent
        return result

    def _score_all(
        self,
        normalized: str,
        intents: Sequence[Intent],
    ) -> Iterator[tuple[Intent, IntentScore]]:
        tokens = self.expander.expand(normalized)
        boosts = self._resolve_boosts(normalized)
        for intent in intents:
            yield intent, self.score_intent(intent, normalized, tokens, boosts.get(intent.id, 0.0))

    def _resolve_boosts(self, normalized: str) -> dict[str, float]:
        """Sum the boosts of every rule triggered by the query, per intent id."""
        boosts: dict[str, float] = {}
        for rule in self.boost_rules:
            if rule.applies_to(normalized):
                boosts[rule.intent_id] = boosts.get(rule.intent_id, 0.0) + rule.boost
        return boosts

    def score_intent(
        self,
        intent: Intent,
        normalized: str,
        tokens: Sequence[str],
        synonym_boost: float = 0.0,
    ) -> IntentScore:
        """
        Score one intent.

        Args:
            intent: The intent to score.
            normalized: Normalized, unexpanded query.
            tokens: Synonym-expanded query tokens.
            synonym_boost: Boost from triggered rules targeting this intent.

        Returns:
            IntentScore with each component and the combined score.
        """
        utterance_score = utterance_match_score(normalized, intent.utterances)
        keyword_score = keyword_overlap_score(tokens, intent.tags)
        matching = matching_keywords(tokens, intent.tags)
        multi_keyword_boost = (
            len(matching) * MULTI_KEYWORD_BOOST if len(matching) >= MULTI_KEYWORD_MIN else 0.0
        )
        combined = (
            utterance_score * UTTERANCE_WEIGHT
            + keyword_score * KEYWORD_WEIGHT
            + synonym_boost
            + multi_keyword_boost
        )
        return IntentScore(
            intent_id=intent.id,
            utterance_score=utterance_score,
            keyword_score=keyword_score,
            synonym_boost=synonym_boost,
            multi_keyword_boost=multi_keyword_boost,
            combined_score=combined,
            matching_keywords=matching,
        )


_default_matcher = IntentMatcher()


def match_intent(
    query: str,
    intents: Sequence[Intent],
    threshold: float = DEFAULT_THRESHOLD,
) -> Intent | NoMatch:
    """Match with the built-in synonym table and boost rules."""
    return _default_matcher.match(query, intents, threshold=threshold)
