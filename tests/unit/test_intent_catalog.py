"""Tests for IntentCatalog loading and validation."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from faq_matcher.exceptions import CatalogError, ResourceNotFoundError
from faq_matcher.models.intent import Intent
from faq_matcher.models.synonyms import BoostRule, SynonymTable
from faq_matcher.storage.intent_catalog import IntentCatalog, QuickReply

PORTFOLIO_IDS = [
    "about-me",
    "summarize-projects",
    "behavior-lab",
    "health-journal",
    "remix-mate",
    "research-paper",
    "skills-stack",
    "contact-links",
    "resume",
]


class TestDefaultCatalog:
    """Tests for the packaged catalog."""

    def test_intents_in_order(self, catalog: IntentCatalog) -> None:
        assert catalog.ids == PORTFOLIO_IDS
        assert len(catalog) == 9
        assert catalog[0].id == "about-me"

    def test_uses_builtin_synonyms(self, catalog: IntentCatalog) -> None:
        assert catalog.synonyms is None
        assert catalog.boost_rules is None

    def test_quick_replies(self, catalog: IntentCatalog) -> None:
        labels = [reply.label for reply in catalog.quick_replies]
        assert labels == ["Projects", "Resume", "Contact", "Tech stack", "How I think"]

    def test_every_intent_reachable(self, catalog: IntentCatalog) -> None:
        assert catalog.unreachable_ids() == []

    def test_links_carry_section_ids(self, catalog: IntentCatalog) -> None:
        links = catalog.get("behavior-lab").links
        assert links[0].section_id == "model-behavior-lab"


class TestCatalogLookup:
    """Tests for id lookups."""

    def test_get(self, catalog: IntentCatalog) -> None:
        assert catalog.get("resume").title == "Resume"

    def test_get_unknown(self, catalog: IntentCatalog) -> None:
        with pytest.raises(ResourceNotFoundError) as exc_info:
            catalog.get("nope")
        assert exc_info.value.status_code == 404

    def test_contains(self, catalog: IntentCatalog) -> None:
        assert "resume" in catalog
        assert catalog.get("resume") in catalog
        assert "nope" not in catalog

    def test_stats(self, catalog: IntentCatalog) -> None:
        stats = catalog.get_catalog_stats()
        assert stats["num_intents"] == 9
        assert stats["by_intent"]["resume"] == {"utterances": 6, "tags": 5}
        assert stats["total_utterances"] == sum(len(i.utterances) for i in catalog)
        assert stats["unreachable"] == []


class TestCatalogValidation:
    """Tests for catalog construction errors."""

    def test_duplicate_ids(self) -> None:
        intents = [Intent(id="a", title="A"), Intent(id="a", title="Again")]
        with pytest.raises(CatalogError, match="Duplicate intent id: a"):
            IntentCatalog(intents)

    def test_boost_rule_unknown_intent(self) -> None:
        rule = BoostRule(trigger_substrings=frozenset({"x"}), intent_id="missing")
        with pytest.raises(CatalogError, match="unknown intent: missing"):
            IntentCatalog([Intent(id="a", title="A", tags=("x",))], boost_rules=[rule])

    def test_quick_reply_unknown_intent(self) -> None:
        reply = QuickReply(intent_id="missing", label="Missing")
        with pytest.raises(CatalogError, match="unknown intent: missing"):
            IntentCatalog([Intent(id="a", title="A", tags=("x",))], quick_replies=[reply])

    def test_unreachable_intents_reported(self) -> None:
        catalog = IntentCatalog([Intent(id="a", title="A"), Intent(id="b", title="B", tags=("b",))])
        assert catalog.unreachable_ids() == ["a"]

    def test_blank_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Intent(id="", title="Blank")

    def test_tags_deduped(self) -> None:
        intent = Intent(id="a", title="A", tags=(" cv ", "cv", "", "pdf"))
        assert intent.tags == ("cv", "pdf")

    def test_intent_is_frozen(self) -> None:
        intent = Intent(id="a", title="A")
        with pytest.raises(ValidationError):
            intent.title = "B"  # type: ignore[misc]


class TestCatalogFiles:
    """Tests for loading catalogs from JSON."""

    def test_from_dict(self, sample_catalog_data: dict) -> None:
        catalog = IntentCatalog.from_dict(sample_catalog_data)
        assert catalog.ids == ["greeting", "pricing"]
        assert isinstance(catalog.synonyms, SynonymTable)
        assert catalog.synonyms["cost"] == frozenset({"price"})
        assert catalog.boost_rules is not None
        assert catalog.boost_rules[0].intent_id == "pricing"
        assert catalog.quick_replies[0].label == "Prices"

    def test_load_from_json(self, tmp_path: Path, sample_catalog_data: dict) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(sample_catalog_data), encoding="utf-8")
        catalog = IntentCatalog.load_from_json(path)
        assert catalog.get("pricing").links[0].href == "#plans"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="Cannot read"):
            IntentCatalog.load_from_json(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError, match="not valid JSON"):
            IntentCatalog.load_from_json(path)

    def test_schema_errors(self) -> None:
        with pytest.raises(CatalogError, match="Invalid intent catalog"):
            IntentCatalog.from_dict({"intents": [{"title": "No id"}]})
