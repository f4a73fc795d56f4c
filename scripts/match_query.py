#!/usr/bin/env python
"""Match queries against the intent catalog from the command line."""

import argparse
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from faq_matcher.matchers.similarity import IntentMatcher
from faq_matcher.storage.intent_catalog import IntentCatalog


def main() -> None:
    """Print the decision and top scores for each query."""
    parser = argparse.ArgumentParser(description="Match queries to FAQ intents")
    parser.add_argument("queries", nargs="+", help="Queries to match")
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Path to intent catalog JSON (packaged catalog if omitted)",
    )
    parser.add_argument("--threshold", type=float, default=None, help="Match threshold")
    parser.add_argument("--top-k", type=int, default=3, help="Score breakdowns to show")
    args = parser.parse_args()

    catalog = (
        IntentCatalog.load_from_json(args.catalog) if args.catalog else IntentCatalog.load_default()
    )
    matcher = IntentMatcher(synonyms=catalog.synonyms, boost_rules=catalog.boost_rules)

    for query in args.queries:
        result = matcher.rank(query, catalog, threshold=args.threshold, top_k=args.top_k)
        decision = result.intent.id if result.intent else "NO_MATCH"
        print(f"{query!r} -> {decision} (best score {result.best_score:.3f})")
        for score in result.scores:
            print(
                f"    {score.intent_id:<22} combined={score.combined_score:.3f} "
                f"utterance={score.utterance_score:.3f} keyword={score.keyword_score:.3f} "
                f"boost={score.synonym_boost + score.multi_keyword_boost:.2f}"
            )


if __name__ == "__main__":
    main()
