"""Match outcome models."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field

from faq_matcher.models.intent import Intent


class NoMatch(str, Enum):
    """Explicit "no intent cleared the threshold" outcome."""

    NO_MATCH = "no_match"


NO_MATCH = NoMatch.NO_MATCH


class IntentScore(BaseModel):
    """Score breakdown for a single intent against a single query."""

    intent_id: str
    utterance_score: float = Field(ge=0.0, le=1.0)
    keyword_score: float = Field(ge=0.0, le=1.0)
    synonym_boost: float = 0.0
    multi_keyword_boost: float = Field(default=0.0, ge=0.0)
    # Not clamped: boosts can push this above 1.0.
    combined_score: float
    matching_keywords: list[str] = Field(default_factory=list)


@dataclass
class MatchingResult:
    """Result of ranking a query against the whole catalog."""

    query: str
    normalized_query: str
    threshold: float
    intent: Intent | None = None
    best_score: float = 0.0
    scores: list[IntentScore] = field(default_factory=list)

    @property
    def is_match(self) -> bool:
        return self.intent is not None

    @property
    def outcome(self) -> Intent | NoMatch:
        """The winning intent, or ``NO_MATCH``."""
        return self.intent if self.intent is not None else NO_MATCH
