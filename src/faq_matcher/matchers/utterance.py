"""Similarity between a query and an intent's example utterances."""

from collections.abc import Iterable

from faq_matcher.matchers.normalizer import normalize_text, split_words

EXACT_MATCH_SCORE = 1.0
CONTAINMENT_WEIGHT = 0.8
WORD_OVERLAP_WEIGHT = 0.6


def utterance_similarity(normalized_query: str, normalized_utterance: str) -> float:
    """
    Score one normalized utterance against the normalized query.

    Takes the best of three strategies:
    - exact equality scores 1.0
    - containment in either direction scores the length ratio of the
      shorter string to the longer one, times 0.8
    - word overlap scores shared distinct words over the larger word
      count, times 0.6
    """
    if not normalized_query:
        return 0.0
    if normalized_query == normalized_utterance:
        return EXACT_MATCH_SCORE

    score = 0.0
    if normalized_utterance in normalized_query or normalized_query in normalized_utterance:
        shorter = min(len(normalized_query), len(normalized_utterance))
        longer = max(len(normalized_query), len(normalized_utterance), 1)
        score = shorter / longer * CONTAINMENT_WEIGHT

    query_words = split_words(normalized_query)
    utterance_words = split_words(normalized_utterance)
    common = set(query_words) & set(utterance_words)
    if common:
        word_score = len(common) / max(len(query_words), len(utterance_words), 1)
        score = max(score, word_score * WORD_OVERLAP_WEIGHT)

    return score


def utterance_match_score(normalized_query: str, utterances: Iterable[str]) -> float:
    """
    Best similarity between the query and any of an intent's utterances.

    Args:
        normalized_query: The query after ``normalize_text`` (not expanded).
        utterances: Raw utterances; each is normalized before comparison.

    Returns:
        Score in [0, 1]; 0.0 for an empty query or no utterances.
    """
    if not normalized_query:
        return 0.0
    return max(
        (utterance_similarity(normalized_query, normalize_text(u)) for u in utterances),
        default=0.0,
    )
