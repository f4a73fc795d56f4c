"""Evaluation runner for batch FAQ intent matching."""

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from evals.metrics import NO_MATCH_LABEL, EvalMetrics
from faq_matcher.matchers.similarity import IntentMatcher
from faq_matcher.storage.intent_catalog import IntentCatalog


@dataclass
class EvalExample:
    """A single evaluation example."""

    id: str
    input_text: str
    expected_intent: str
    metadata: dict[str, Any] | None = None


class EvalRunner:
    """
    Batch evaluation runner for the intent matcher.

    Loads a labeled dataset, matches each example against the catalog,
    and computes precision, recall, and F1 per intent. "No match" is
    scored as its own label.
    """

    def __init__(
        self,
        catalog: IntentCatalog,
        matcher: IntentMatcher | None = None,
        threshold: float | None = None,
    ) -> None:
        """
        Initialize the evaluation runner.

        Args:
            catalog: The intent catalog to evaluate against.
            matcher: Matcher under test (built from the catalog if not provided).
            threshold: Threshold override for every example.
        """
        self.catalog = catalog
        self.matcher = matcher or IntentMatcher(
            synonyms=catalog.synonyms,
            boost_rules=catalog.boost_rules,
        )
        self.threshold = threshold
        self.metrics = EvalMetrics()

    def load_dataset(self, filepath: str | Path) -> list[EvalExample]:
        """
        Load evaluation dataset from JSON file.

        Expected format:
        [
            {"id": "resume-1", "input": "show me your cv", "intent": "resume"},
            {"id": "oos-1", "input": "what is the weather today", "intent": null},
            ...
        ]

        Args:
            filepath: Path to the dataset JSON file.

        Returns:
            List of EvalExample objects.
        """
        filepath = Path(filepath)
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)

        return [
            EvalExample(
                id=item["id"],
                input_text=item["input"],
                expected_intent=item.get("intent") or NO_MATCH_LABEL,
                metadata=item.get("metadata"),
            )
            for item in data
        ]

    def run_single(self, example: EvalExample) -> dict[str, Any]:
        """
        Run a single evaluation example.

        Args:
            example: The example to evaluate.

        Returns:
            Result dictionary with prediction details.
        """
        start_time = time.perf_counter()
        result = self.matcher.rank(
            example.input_text,
            self.catalog,
            threshold=self.threshold,
            top_k=0,
        )
        latency_ms = (time.perf_counter() - start_time) * 1000

        predicted = result.intent.id if result.intent else NO_MATCH_LABEL
        self.metrics.record_prediction(
            example_id=example.id,
            input_text=example.input_text,
            expected=example.expected_intent,
            predicted=predicted,
            latency_ms=latency_ms,
            score=result.best_score,
        )

        return {
            "id": example.id,
            "input": example.input_text,
            "expected": example.expected_intent,
            "predicted": predicted,
            "correct": predicted == example.expected_intent,
            "score": result.best_score,
            "latency_ms": latency_ms,
        }

    def run(
        self,
        examples: list[EvalExample],
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> EvalMetrics:
        """
        Run evaluation on a list of examples.

        Args:
            examples: List of examples to evaluate.
            progress_callback: Optional callback(completed, total) for progress.

        Returns:
            EvalMetrics with aggregated results.
        """
        self.metrics = EvalMetrics()

        for completed, example in enumerate(examples, start=1):
            self.run_single(example)
            if progress_callback:
                progress_callback(completed, len(examples))

        return self.metrics

    def run_from_file(
        self,
        filepath: str | Path,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> EvalMetrics:
        """
        Load dataset from file and run evaluation.

        Args:
            filepath: Path to dataset JSON file.
            progress_callback: Optional progress callback.

        Returns:
            EvalMetrics with results.
        """
        examples = self.load_dataset(filepath)
        return self.run(examples, progress_callback)
