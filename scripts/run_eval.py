#!/usr/bin/env python
"""Run evaluation on the golden set."""

import argparse
import json
import sys
from pathlib import Path

# Add project root and src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / "src"))

from evals.runner import EvalRunner
from faq_matcher.config import get_settings
from faq_matcher.exceptions import CatalogError
from faq_matcher.storage.intent_catalog import IntentCatalog


def progress_bar(completed: int, total: int) -> None:
    """Simple progress bar."""
    pct = completed / total
    bar_len = 40
    filled = int(bar_len * pct)
    bar = "=" * filled + "-" * (bar_len - filled)
    print(f"\r[{bar}] {completed}/{total} ({pct:.1%})", end="", flush=True)


def main() -> None:
    """Run evaluation."""
    parser = argparse.ArgumentParser(description="Run FAQ matcher evaluation")
    parser.add_argument(
        "--dataset",
        type=str,
        default="evals/datasets/golden_set.json",
        help="Path to evaluation dataset",
    )
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Path to intent catalog JSON (configured or packaged catalog if omitted)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Match threshold override",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to save results JSON",
    )
    parser.add_argument(
        "--min-f1",
        type=float,
        default=0.85,
        help="Macro F1 required for a zero exit code",
    )
    args = parser.parse_args()

    dataset_path = project_root / args.dataset
    if not dataset_path.exists():
        print(f"Dataset not found: {dataset_path}")
        sys.exit(1)

    settings = get_settings()
    catalog_path = args.catalog or settings.catalog_path
    try:
        catalog = (
            IntentCatalog.load_from_json(catalog_path)
            if catalog_path
            else IntentCatalog.load_default()
        )
    except CatalogError as e:
        print(f"{e.message}: {e.detail}")
        sys.exit(1)

    threshold = args.threshold if args.threshold is not None else settings.match_threshold
    print(f"Loading dataset: {dataset_path}")
    print(f"Catalog: {len(catalog)} intents, threshold={threshold}")
    print()

    runner = EvalRunner(catalog=catalog, threshold=threshold)
    metrics = runner.run_from_file(dataset_path, progress_callback=progress_bar)

    print("\n")
    metrics.print_report()

    if args.output:
        output_path = project_root / args.output
        with open(output_path, "w") as f:
            json.dump(metrics.to_dict(), f, indent=2)
        print(f"\nResults saved to: {output_path}")

    print("\n--- Success Criteria Check ---")
    f1_pass = metrics.macro_f1 >= args.min_f1
    print(f"F1 >= {args.min_f1:.0%}: {'PASS' if f1_pass else 'FAIL'} ({metrics.macro_f1:.1%})")

    sys.exit(0 if f1_pass else 1)


if __name__ == "__main__":
    main()
