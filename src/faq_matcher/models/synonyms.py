"""Synonym table and targeted boost rules used during matching."""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field, field_validator


class SynonymTable(Mapping[str, frozenset[str]]):
    """
    Immutable mapping from a normalized word to the terms it expands to.

    Values may be multi-word phrases; they are added to a query's token
    set as-is and never re-split.
    """

    def __init__(self, entries: Mapping[str, Iterable[str]] | None = None) -> None:
        table: dict[str, frozenset[str]] = {}
        for word, synonyms in (entries or {}).items():
            key = word.strip().lower()
            if not key:
                continue
            values = {s.strip().lower() for s in synonyms}
            values.discard("")
            table[key] = table.get(key, frozenset()) | frozenset(values)
        self._table = MappingProxyType(table)

    def __getitem__(self, word: str) -> frozenset[str]:
        return self._table[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"SynonymTable({len(self)} entries)"

    def to_dict(self) -> dict[str, list[str]]:
        """Plain JSON-friendly copy of the table."""
        return {word: sorted(values) for word, values in self._table.items()}


class BoostRule(BaseModel):
    """
    Fixed score bonus for one intent when the query mentions a trigger.

    Triggers are matched as substrings of the normalized query, so a
    trigger of ``cv`` also fires on ``cvs``.
    """

    trigger_substrings: frozenset[str] = Field(min_length=1)
    intent_id: str = Field(min_length=1)
    boost: float = Field(default=0.5)

    model_config = {"frozen": True}

    @field_validator("trigger_substrings")
    @classmethod
    def _normalize_triggers(cls, triggers: frozenset[str]) -> frozenset[str]:
        cleaned = frozenset(t.strip().lower() for t in triggers) - {""}
        if not cleaned:
            raise ValueError("boost rule needs at least one non-blank trigger")
        return cleaned

    def applies_to(self, normalized_query: str) -> bool:
        """Whether any trigger occurs in the normalized query."""
        return any(trigger in normalized_query for trigger in self.trigger_substrings)
