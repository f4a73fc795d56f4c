"""Intent catalog management."""

import json
import logging
from collections.abc import Iterable, Iterator, Sequence
from importlib import resources
from pathlib import Path
from typing import Any, overload

from pydantic import BaseModel, Field, ValidationError

from faq_matcher.exceptions import CatalogError, ResourceNotFoundError
from faq_matcher.models.intent import Intent
from faq_matcher.models.synonyms import BoostRule, SynonymTable

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_RESOURCE = "faq_intents.json"


class QuickReply(BaseModel):
    """A suggestion chip that jumps straight to an intent."""

    intent_id: str
    label: str

    model_config = {"frozen": True}


class _CatalogFile(BaseModel):
    """On-disk catalog layout."""

    intents: list[Intent]
    synonyms: dict[str, list[str]] | None = None
    boost_rules: list[BoostRule] | None = None
    quick_replies: list[QuickReply] = Field(default_factory=list)


class IntentCatalog(Sequence[Intent]):
    """
    Ordered, read-only collection of FAQ intents.

    Besides the intents themselves a catalog may carry its own synonym
    table, boost rules and quick replies. ``None`` for synonyms or boost
    rules means "use the matcher's built-in defaults".
    """

    def __init__(
        self,
        intents: Iterable[Intent],
        synonyms: SynonymTable | None = None,
        boost_rules: Iterable[BoostRule] | None = None,
        quick_replies: Iterable[QuickReply] | None = None,
    ) -> None:
        """
        Build and validate a catalog.

        Raises:
            CatalogError: On duplicate intent ids, or boost rules / quick
                replies that reference an unknown intent.
        """
        self._intents: tuple[Intent, ...] = tuple(intents)
        self._by_id: dict[str, Intent] = {}
        for intent in self._intents:
            if intent.id in self._by_id:
                raise CatalogError(f"Duplicate intent id: {intent.id}")
            self._by_id[intent.id] = intent

        self.synonyms = synonyms
        self.boost_rules: tuple[BoostRule, ...] | None = (
            tuple(boost_rules) if boost_rules is not None else None
        )
        self.quick_replies: tuple[QuickReply, ...] = tuple(quick_replies or ())

        for rule in self.boost_rules or ():
            if rule.intent_id not in self._by_id:
                raise CatalogError(f"Boost rule targets unknown intent: {rule.intent_id}")
        for reply in self.quick_replies:
            if reply.intent_id not in self._by_id:
                raise CatalogError(f"Quick reply targets unknown intent: {reply.intent_id}")

        unreachable = self.unreachable_ids()
        if unreachable:
            logger.warning("Catalog has unreachable intents: %s", ", ".join(unreachable))

    @classmethod
    def load_from_json(cls, filepath: str | Path) -> "IntentCatalog":
        """
        Load a catalog from a JSON file.

        Expected JSON format:
        {
            "intents": [
                {"id": "resume", "title": "Resume", "utterances": [...], "tags": [...],
                 "answer": "...", "links": [{"label": "...", "href": "..."}]},
                ...
            ],
            "synonyms": {"cv": ["resume", "curriculum vitae"]},
            "boost_rules": [{"trigger_substrings": ["cv"], "intent_id": "resume", "boost": 0.5}],
            "quick_replies": [{"intent_id": "resume", "label": "Resume"}]
        }

        Args:
            filepath: Path to the JSON file.

        Returns:
            The loaded catalog.

        Raises:
            CatalogError: If the file is missing, not JSON, or not a valid catalog.
        """
        filepath = Path(filepath)
        try:
            with open(filepath, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise CatalogError(f"Cannot read intent catalog {filepath}", detail=str(e)) from e
        except json.JSONDecodeError as e:
            raise CatalogError(f"Intent catalog {filepath} is not valid JSON", detail=str(e)) from e

        catalog = cls.from_dict(data, source=str(filepath))
        logger.info("Loaded %d intents from %s", len(catalog), filepath)
        return catalog

    @classmethod
    def from_dict(cls, data: Any, source: str = "<dict>") -> "IntentCatalog":
        """Build a catalog from already-parsed catalog data."""
        try:
            parsed = _CatalogFile.model_validate(data)
        except ValidationError as e:
            raise CatalogError(f"Invalid intent catalog {source}", detail=str(e)) from e

        return cls(
            intents=parsed.intents,
            synonyms=SynonymTable(parsed.synonyms) if parsed.synonyms is not None else None,
            boost_rules=parsed.boost_rules,
            quick_replies=parsed.quick_replies,
        )

    @classmethod
    def load_default(cls) -> "IntentCatalog":
        """Load the catalog packaged with the library."""
        resource = resources.files("faq_matcher.data").joinpath(DEFAULT_CATALOG_RESOURCE)
        with resources.as_file(resource) as path:
            return cls.load_from_json(path)

    @overload
    def __getitem__(self, index: int) -> Intent: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Intent]: ...

    def __getitem__(self, index: int | slice) -> Intent | Sequence[Intent]:
        return self._intents[index]

    def __len__(self) -> int:
        return len(self._intents)

    def __iter__(self) -> Iterator[Intent]:
        return iter(self._intents)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._by_id
        return item in self._intents

    @property
    def ids(self) -> list[str]:
        """Intent ids in catalog order."""
        return [intent.id for intent in self._intents]

    def get(self, intent_id: str) -> Intent:
        """
        Look up an intent by id.

        Raises:
            ResourceNotFoundError: If no intent has that id.
        """
        try:
            return self._by_id[intent_id]
        except KeyError:
            raise ResourceNotFoundError(f"Intent not found: {intent_id}") from None

    def unreachable_ids(self) -> list[str]:
        """Ids of intents with neither utterances nor tags."""
        return [intent.id for intent in self._intents if not intent.is_reachable]

    def get_catalog_stats(self) -> dict[str, Any]:
        """
        Get statistics about the intent catalog.

        Returns:
            Dict with catalog statistics.
        """
        return {
            "num_intents": len(self._intents),
            "total_utterances": sum(len(i.utterances) for i in self._intents),
            "total_tags": sum(len(i.tags) for i in self._intents),
            "by_intent": {
                i.id: {"utterances": len(i.utterances), "tags": len(i.tags)}
                for i in self._intents
            },
            "unreachable": self.unreachable_ids(),
        }
