"""Synonym expansion of normalized queries."""

from faq_matcher.matchers.normalizer import split_words
from faq_matcher.models.synonyms import BoostRule, SynonymTable

# Shorthand a visitor is likely to type, mapped to the terms the catalog tags use
DEFAULT_SYNONYMS = SynonymTable({
    "paper": ["research", "publication", "ijraset"],
    "cv": ["resume", "curriculum vitae"],
    "remix": ["remixmate", "remix mate"],
    "eval": ["evaluation", "testing", "benchmark"],
    "rag": ["retrieval", "augmented", "generation"],
    "llm": ["language model", "model"],
    "tech": ["technology", "technologies", "stack", "skills"],
    "contact": ["email", "reach", "get in touch", "social"],
})

DEFAULT_BOOST_RULES: tuple[BoostRule, ...] = (
    BoostRule(trigger_substrings=frozenset({"cv", "resume"}), intent_id="resume", boost=0.5),
)


class SynonymExpander:
    """Adds synonym tokens to a query without touching the original words."""

    def __init__(self, table: SynonymTable | None = None) -> None:
        self.table = table if table is not None else DEFAULT_SYNONYMS

    def expand(self, normalized: str) -> tuple[str, ...]:
        """
        Expand a normalized string into its matching tokens.

        Args:
            normalized: Output of ``normalize_text``.

        Returns:
            Original words followed by the synonyms of any word found in
            the table, duplicates removed, first-seen order kept.
        """
        words = split_words(normalized)
        tokens = dict.fromkeys(words)
        for word in words:
            for synonym in sorted(self.table.get(word, ())):
                tokens.setdefault(synonym)
        return tuple(tokens)
