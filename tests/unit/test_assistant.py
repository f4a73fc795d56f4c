"""Tests for the FAQ chat assistant."""

import logging

import pytest
from prometheus_client import REGISTRY

from faq_matcher.assistant import FALLBACK_TEXT, INTRO_TEXT, FaqAssistant
from faq_matcher.config import Settings
from faq_matcher.exceptions import ResourceNotFoundError
from faq_matcher.models.intent import Intent
from faq_matcher.storage.intent_catalog import IntentCatalog


@pytest.fixture
def assistant(catalog: IntentCatalog) -> FaqAssistant:
    """Assistant over the packaged catalog."""
    return FaqAssistant(catalog)


def _match_count(outcome: str, intent_id: str) -> float:
    value = REGISTRY.get_sample_value(
        "faq_match_total", {"outcome": outcome, "intent_id": intent_id}
    )
    return value or 0.0


class TestReplies:
    """Tests for FaqAssistant.reply."""

    def test_matched_reply(self, assistant: FaqAssistant) -> None:
        reply = assistant.reply("Show me your CV")
        assert reply is not None
        assert reply.intent_id == "resume"
        assert reply.text.startswith("You can download my resume")
        assert [link.label for link in reply.links] == ["Download Resume"]
        assert not reply.is_fallback
        assert reply.score == pytest.approx(1.22)

    def test_fallback_reply(self, assistant: FaqAssistant) -> None:
        reply = assistant.reply("what is the weather today")
        assert reply is not None
        assert reply.is_fallback
        assert reply.text == FALLBACK_TEXT
        assert reply.intent_id is None
        assert [s.label for s in reply.suggestions][:2] == ["Projects", "Resume"]

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_message(self, assistant: FaqAssistant, text: str) -> None:
        assert assistant.reply(text) is None

    def test_threshold_override(self, catalog: IntentCatalog) -> None:
        reply = FaqAssistant(catalog, threshold=0.6).reply("model behavior lab")
        assert reply is not None
        assert reply.is_fallback

    def test_from_settings(self) -> None:
        assistant = FaqAssistant.from_settings(Settings(match_threshold=0.6))
        assert assistant.threshold == 0.6
        assert len(assistant.catalog) == 9

    def test_analytics_log(self, assistant: FaqAssistant, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="faq_matcher.assistant")
        assistant.reply("  Show me your CV ")

        records = [r for r in caplog.records if r.getMessage() == "FAQ intent matched"]
        assert len(records) == 1
        assert records[0].intent_id == "resume"
        assert records[0].query == "show me your cv"
        assert records[0].event_time

    def test_records_metrics(self, assistant: FaqAssistant) -> None:
        before = _match_count("matched", "resume")
        no_match_before = _match_count("no_match", "")
        assistant.reply("show me your cv")
        assistant.reply("what is the weather today")
        assert _match_count("matched", "resume") == before + 1
        assert _match_count("no_match", "") == no_match_before + 1


class TestQuickReplies:
    """Tests for intro and suggestion chips."""

    def test_intro(self, assistant: FaqAssistant) -> None:
        reply = assistant.intro()
        assert reply.text == INTRO_TEXT
        assert len(reply.suggestions) == 5

    def test_suggestions_from_catalog(self, assistant: FaqAssistant) -> None:
        suggestions = assistant.suggestions()
        assert suggestions[3].intent_id == "skills-stack"
        assert suggestions[3].label == "Tech stack"

    def test_default_suggestions(self) -> None:
        intents = [Intent(id="hidden", title="Hidden")] + [
            Intent(id=f"topic-{i}", title=f"Topic {i}", tags=(f"t{i}",)) for i in range(7)
        ]
        suggestions = FaqAssistant(IntentCatalog(intents)).suggestions()
        assert [s.intent_id for s in suggestions] == [f"topic-{i}" for i in range(5)]
        assert suggestions[0].label == "Topic 0"

    def test_reply_for_intent(self, assistant: FaqAssistant) -> None:
        reply = assistant.reply_for_intent("contact-links")
        assert reply.intent_id == "contact-links"
        assert reply.score is None
        assert [link.label for link in reply.links] == ["Email", "GitHub", "LinkedIn"]

    def test_reply_for_intent_skips_matching(
        self, assistant: FaqAssistant, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A click answers the chosen intent and logs its title as the query."""
        caplog.set_level(logging.INFO, logger="faq_matcher.assistant")
        before = _match_count("matched", "contact-links")

        assistant.reply_for_intent("contact-links")

        assert _match_count("matched", "contact-links") == before
        records = [r for r in caplog.records if r.getMessage() == "FAQ intent matched"]
        assert [r.query for r in records] == ["contact/links"]
        assert records[0].intent_id == "contact-links"

    def test_reply_for_unknown_intent(self, assistant: FaqAssistant) -> None:
        with pytest.raises(ResourceNotFoundError):
            assistant.reply_for_intent("nope")
