"""Evaluation harness for FAQ intent matching."""

from evals.metrics import NO_MATCH_LABEL, EvalMetrics, IntentMetrics
from evals.runner import EvalExample, EvalRunner

__all__ = ["EvalExample", "EvalMetrics", "EvalRunner", "IntentMetrics", "NO_MATCH_LABEL"]
