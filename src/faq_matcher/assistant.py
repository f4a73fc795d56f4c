"""Scripted FAQ assistant: turns matcher decisions into chat replies."""

import logging
import time
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from faq_matcher.config import Settings, get_settings
from faq_matcher.matchers.similarity import IntentMatcher
from faq_matcher.models.intent import Intent, IntentLink
from faq_matcher.models.response import MatchingResult
from faq_matcher.observability.metrics import record_match
from faq_matcher.storage.intent_catalog import IntentCatalog

logger = logging.getLogger(__name__)

INTRO_TEXT = (
    "I'm a lightweight FAQ bot. Ask about my projects, resume, tech stack, or how I think."
)
FALLBACK_TEXT = "I'm not sure. Try one of these:"

# Suggestions offered when the catalog defines no quick replies
MAX_DEFAULT_SUGGESTIONS = 5


class Suggestion(BaseModel):
    """A clickable quick reply."""

    intent_id: str
    label: str


class AssistantReply(BaseModel):
    """One bot message."""

    text: str
    intent_id: str | None = None
    links: list[IntentLink] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
    is_fallback: bool = False
    score: float | None = Field(
        default=None,
        description="Best combined score for the query (can exceed 1.0)",
    )


class FaqAssistant:
    """
    FAQ chat assistant backed by the intent matcher.

    Matched queries get the intent's answer and links; anything else gets
    a fallback message with quick-reply suggestions. Every match is logged
    as an analytics event.
    """

    def __init__(
        self,
        catalog: IntentCatalog,
        matcher: IntentMatcher | None = None,
        threshold: float | None = None,
    ) -> None:
        """
        Initialize the assistant.

        Args:
            catalog: Intents to answer from.
            matcher: Matcher to use (built from the catalog's synonyms and
                boost rules if not provided).
            threshold: Match threshold (the matcher's default if None).
        """
        self.catalog = catalog
        self.matcher = matcher or IntentMatcher(
            synonyms=catalog.synonyms,
            boost_rules=catalog.boost_rules,
        )
        self.threshold = threshold if threshold is not None else self.matcher.threshold

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "FaqAssistant":
        """Build an assistant from the configured catalog and threshold."""
        settings = settings or get_settings()
        if settings.catalog_path:
            catalog = IntentCatalog.load_from_json(settings.catalog_path)
        else:
            catalog = IntentCatalog.load_default()
        return cls(catalog, threshold=settings.match_threshold)

    def intro(self) -> AssistantReply:
        """Greeting shown when the chat opens."""
        return AssistantReply(text=INTRO_TEXT, suggestions=self.suggestions())

    def suggestions(self) -> list[Suggestion]:
        """Quick replies, defaulting to the first reachable intents."""
        if self.catalog.quick_replies:
            return [
                Suggestion(intent_id=reply.intent_id, label=reply.label)
                for reply in self.catalog.quick_replies
            ]
        reachable = [intent for intent in self.catalog if intent.is_reachable]
        return [
            Suggestion(intent_id=intent.id, label=intent.title)
            for intent in reachable[:MAX_DEFAULT_SUGGESTIONS]
        ]

    def classify(
        self,
        query: str,
        threshold: float | None = None,
        top_k: int | None = None,
    ) -> MatchingResult:
        """
        Run the matcher against the catalog and record match metrics.

        Args:
            query: Raw user text.
            threshold: Override of the assistant's threshold.
            top_k: Number of score breakdowns to keep (all if None).
        """
        threshold = self.threshold if threshold is None else threshold
        start_time = time.perf_counter()
        result = self.matcher.rank(query, self.catalog, threshold=threshold, top_k=top_k)
        duration = time.perf_counter() - start_time

        record_match(result.intent.id if result.intent else None, result.best_score, duration)
        return result

    def reply(self, text: str) -> AssistantReply | None:
        """
        Answer a user message.

        Args:
            text: Raw user message.

        Returns:
            The bot reply, or None for a blank message (nothing to answer).
        """
        query = text.strip()
        if not query:
            return None

        result = self.classify(query, top_k=0)
        intent = result.intent
        if intent is None:
            logger.info(
                "No FAQ intent matched",
                extra={"best_score": round(result.best_score, 4)},
            )
            return AssistantReply(
                text=FALLBACK_TEXT,
                suggestions=self.suggestions(),
                is_fallback=True,
                score=result.best_score,
            )

        self._log_intent(intent.id, query)
        return self._answer(intent, score=result.best_score)

    def reply_for_intent(self, intent_id: str) -> AssistantReply:
        """
        Answer a quick-reply click directly, without matching.

        Raises:
            ResourceNotFoundError: If the intent id is unknown.
        """
        intent = self.catalog.get(intent_id)
        self._log_intent(intent.id, intent.title)
        return self._answer(intent)

    def _answer(self, intent: Intent, score: float | None = None) -> AssistantReply:
        return AssistantReply(
            text=intent.answer,
            intent_id=intent.id,
            links=list(intent.links),
            score=score,
        )

    def _log_intent(self, intent_id: str, query: str) -> None:
        """Analytics event for a resolved intent."""
        logger.info(
            "FAQ intent matched",
            extra={
                "intent_id": intent_id,
                "query": query.lower().strip(),
                "event_time": datetime.now(timezone.utc).isoformat(),
            },
        )
