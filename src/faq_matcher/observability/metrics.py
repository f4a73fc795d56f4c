"""Prometheus metrics definitions and recording."""

from prometheus_client import Counter, Histogram

MATCH_TOTAL = Counter(
    "faq_match_total",
    "FAQ queries by outcome and matched intent",
    ["outcome", "intent_id"],
)

MATCH_SCORE = Histogram(
    "faq_match_score",
    "Best combined score per FAQ query (boosted scores can exceed 1.0)",
    buckets=(0.1, 0.2, 0.3, 0.4, 0.5, 0.75, 1.0, 1.5, 2.0),
)

MATCH_DURATION = Histogram(
    "faq_match_duration_seconds",
    "Time spent matching a single query",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1),
)


def record_match(intent_id: str | None, score: float, duration_seconds: float) -> None:
    """
    Record the outcome of one matching call.

    Args:
        intent_id: Winning intent id, or None for no match.
        score: Best combined score seen, whether or not it cleared the threshold.
        duration_seconds: Time taken by the matcher.
    """
    if intent_id is None:
        MATCH_TOTAL.labels(outcome="no_match", intent_id="").inc()
    else:
        MATCH_TOTAL.labels(outcome="matched", intent_id=intent_id).inc()
    MATCH_SCORE.observe(score)
    MATCH_DURATION.observe(duration_seconds)
