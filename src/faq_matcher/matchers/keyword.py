"""Keyword overlap between expanded query tokens and intent tags."""

from collections.abc import Sequence

EXACT_WEIGHT = 0.6
TAG_COVERAGE_WEIGHT = 0.4
PARTIAL_MATCH_CREDIT = 0.3


def _overlaps(token: str, tag: str) -> bool:
    return token == tag or token in tag or tag in token


def keyword_overlap_score(tokens: Sequence[str], tags: Sequence[str]) -> float:
    """
    Score how well the query tokens cover an intent's tags.

    Exact hits count once per distinct tag. Every (tag, token) pair that is
    not equal but where one contains the other earns 0.3 of partial credit,
    so very short tokens like ``me`` can collect credit from many tags.

    Args:
        tokens: Synonym-expanded query tokens.
        tags: The intent's tags.

    Returns:
        ``min(coverage * 0.6 + tag_coverage * 0.4, 1.0)`` where coverage is
        relative to the token count and tag coverage to the tag count.
    """
    lowered_tokens = [token.lower() for token in tokens]
    lowered_tags = [tag.lower() for tag in tags]
    token_set = set(lowered_tokens)

    exact_matches = len({tag for tag in lowered_tags if tag in token_set})
    partial_matches = 0.0
    for tag in lowered_tags:
        for token in lowered_tokens:
            if token != tag and (token in tag or tag in token):
                partial_matches += PARTIAL_MATCH_CREDIT

    total_matches = exact_matches + partial_matches
    coverage = total_matches / max(len(lowered_tokens), 1)
    tag_coverage = exact_matches / max(len(lowered_tags), 1)

    return min(coverage * EXACT_WEIGHT + tag_coverage * TAG_COVERAGE_WEIGHT, 1.0)


def matching_keywords(tokens: Sequence[str], tags: Sequence[str]) -> list[str]:
    """Tokens that equal, contain or are contained in at least one tag."""
    lowered_tags = [tag.lower() for tag in tags]
    return [
        token
        for token in tokens
        if any(_overlaps(token.lower(), tag) for tag in lowered_tags)
    ]
