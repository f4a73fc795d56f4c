"""Text normalization shared by every matching strategy."""

import re

# Anything outside ASCII word characters (spaces included) collapses to one space.
_NON_WORD_RUN = re.compile(r"[^a-z0-9_]+")


def normalize_text(text: str) -> str:
    """
    Normalize raw text for comparison.

    Lowercases, turns every run of characters that are not ASCII letters,
    digits or underscores into a single space, and trims the ends.
    Punctuation becomes whitespace rather than being deleted, so
    ``"e-mail"`` normalizes to ``"e mail"``, not ``"email"``. Non-ASCII
    letters are treated as punctuation.

    The result is idempotent: normalizing it again returns it unchanged.
    """
    return _NON_WORD_RUN.sub(" ", text.lower()).strip()


def split_words(normalized: str) -> list[str]:
    """Split normalized text into words, dropping empties."""
    return [word for word in normalized.split(" ") if word]
