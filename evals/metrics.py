"""Evaluation metrics for FAQ intent matching."""

from dataclasses import dataclass, field
from typing import Any, Callable

# Label used for "no intent matched" in both expectations and predictions
NO_MATCH_LABEL = "NO_MATCH"


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


@dataclass
class IntentMetrics:
    """Confusion counts for one label (an intent id or NO_MATCH_LABEL)."""

    intent_id: str
    true_positives: int = 0
    false_positives: int = 0
    false_negatives: int = 0

    @property
    def precision(self) -> float:
        """TP / (TP + FP)."""
        return _ratio(self.true_positives, self.true_positives + self.false_positives)

    @property
    def recall(self) -> float:
        """TP / (TP + FN)."""
        return _ratio(self.true_positives, self.support)

    @property
    def f1(self) -> float:
        p, r = self.precision, self.recall
        return _ratio(2 * p * r, p + r)

    @property
    def support(self) -> int:
        """Number of examples labelled with this intent."""
        return self.true_positives + self.false_negatives

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "intent_id": self.intent_id,
            "precision": round(self.precision, 4),
            "recall": round(self.recall, 4),
            "f1": round(self.f1, 4),
            "support": self.support,
            "true_positives": self.true_positives,
            "false_positives": self.false_positives,
            "false_negatives": self.false_negatives,
        }


@dataclass
class EvalMetrics:
    """Aggregate evaluation metrics."""

    total_examples: int = 0
    correct_predictions: int = 0
    no_match_count: int = 0

    intent_metrics: dict[str, IntentMetrics] = field(default_factory=dict)

    latencies_ms: list[float] = field(default_factory=list)

    # Misclassified examples for the report
    misses: list[dict[str, Any]] = field(default_factory=list)

    @property
    def accuracy(self) -> float:
        """Share of examples whose predicted label equals the expected one."""
        return _ratio(self.correct_predictions, self.total_examples)

    @property
    def no_match_rate(self) -> float:
        """Share of queries that fell through to the fallback reply."""
        return _ratio(self.no_match_count, self.total_examples)

    def _macro(self, score: Callable[[IntentMetrics], float]) -> float:
        values = [score(m) for m in self.intent_metrics.values()]
        return _ratio(sum(values), len(values))

    @property
    def macro_precision(self) -> float:
        return self._macro(lambda m: m.precision)

    @property
    def macro_recall(self) -> float:
        return self._macro(lambda m: m.recall)

    @property
    def macro_f1(self) -> float:
        """Unweighted mean F1, NO_MATCH included as a label."""
        return self._macro(lambda m: m.f1)

    @property
    def weighted_f1(self) -> float:
        """F1 weighted by each label's support."""
        metrics = self.intent_metrics.values()
        return _ratio(sum(m.f1 * m.support for m in metrics), sum(m.support for m in metrics))

    @property
    def avg_latency_ms(self) -> float:
        return _ratio(sum(self.latencies_ms), len(self.latencies_ms))

    def latency_percentile(self, pct: float) -> float:
        """Nearest-rank latency percentile in milliseconds (0 when empty)."""
        if not self.latencies_ms:
            return 0.0
        ordered = sorted(self.latencies_ms)
        return ordered[min(int(len(ordered) * pct), len(ordered) - 1)]

    @property
    def p50_latency_ms(self) -> float:
        return self.latency_percentile(0.5)

    @property
    def p99_latency_ms(self) -> float:
        return self.latency_percentile(0.99)

    def _metrics_for(self, intent_id: str) -> IntentMetrics:
        if intent_id not in self.intent_metrics:
            self.intent_metrics[intent_id] = IntentMetrics(intent_id=intent_id)
        return self.intent_metrics[intent_id]

    def record_prediction(
        self,
        example_id: str,
        input_text: str,
        expected: str,
        predicted: str,
        latency_ms: float,
        score: float = 0.0,
    ) -> None:
        """
        Record a single prediction result.

        Args:
            example_id: Dataset example id.
            input_text: The query that was matched.
            expected: Expected intent id, or NO_MATCH_LABEL.
            predicted: Predicted intent id, or NO_MATCH_LABEL.
            latency_ms: Matching time.
            score: Best combined score for the query.
        """
        self.total_examples += 1
        self.latencies_ms.append(latency_ms)

        if predicted == NO_MATCH_LABEL:
            self.no_match_count += 1

        if expected == predicted:
            self.correct_predictions += 1
            self._metrics_for(expected).true_positives += 1
            return

        self._metrics_for(expected).false_negatives += 1
        self._metrics_for(predicted).false_positives += 1
        self.misses.append({
            "example_id": example_id,
            "input_text": input_text[:100],
            "expected": expected,
            "predicted": predicted,
            "score": round(score, 4),
        })

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            "summary": {
                "total_examples": self.total_examples,
                "accuracy": round(self.accuracy, 4),
                "macro_f1": round(self.macro_f1, 4),
                "weighted_f1": round(self.weighted_f1, 4),
                "macro_precision": round(self.macro_precision, 4),
                "macro_recall": round(self.macro_recall, 4),
                "no_match_rate": round(self.no_match_rate, 4),
            },
            "latency": {
                "avg_ms": round(self.avg_latency_ms, 3),
                "p50_ms": round(self.p50_latency_ms, 3),
                "p99_ms": round(self.p99_latency_ms, 3),
            },
            "per_intent": {
                intent_id: metrics.to_dict()
                for intent_id, metrics in sorted(self.intent_metrics.items())
            },
            "misses": self.misses[:10],
        }

    def print_report(self) -> None:
        """Print a formatted evaluation report."""
        print("\n" + "=" * 60)
        print("FAQ MATCHER EVALUATION REPORT")
        print("=" * 60)

        print(f"\nTotal Examples: {self.total_examples}")
        print(f"Accuracy: {self.accuracy:.2%}")
        print(f"Macro F1: {self.macro_f1:.2%}")
        print(f"Weighted F1: {self.weighted_f1:.2%}")
        print(f"No-match rate: {self.no_match_rate:.1%}")

        print("\n--- Latency ---")
        print(f"Average: {self.avg_latency_ms:.3f}ms")
        print(f"P50: {self.p50_latency_ms:.3f}ms")
        print(f"P99: {self.p99_latency_ms:.3f}ms")

        print("\n--- Per-Intent Metrics ---")
        print(f"{'Intent':<30} {'P':>8} {'R':>8} {'F1':>8} {'Support':>8}")
        print("-" * 62)
        for intent_id, metrics in sorted(self.intent_metrics.items()):
            print(
                f"{intent_id:<30} {metrics.precision:>8.2%} {metrics.recall:>8.2%} "
                f"{metrics.f1:>8.2%} {metrics.support:>8}"
            )

        if self.misses:
            print(f"\n--- Misses ({len(self.misses)}) ---")
            for miss in self.misses[:5]:
                print(
                    f"  {miss['example_id']}: {miss['input_text']!r} "
                    f"expected {miss['expected']}, got {miss['predicted']}"
                )

        print("\n" + "=" * 60)
