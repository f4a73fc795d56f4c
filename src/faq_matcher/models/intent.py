"""Intent catalog models."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class IntentLink(BaseModel):
    """A follow-up link shown alongside an intent's answer."""

    label: str = Field(description="Button text")
    href: str = Field(description="Target URL or in-page anchor")
    section_id: str | None = Field(
        default=None,
        description="Page section to scroll to instead of navigating",
    )

    model_config = {"frozen": True}


class Intent(BaseModel):
    """
    A named FAQ topic the matcher can recognize.

    Only ``utterances`` and ``tags`` take part in matching. ``answer``,
    ``links`` and ``metadata`` are display payload passed through untouched.
    An intent with neither utterances nor tags can never score above zero.
    """

    id: str = Field(min_length=1, description="Unique, stable intent identifier")
    title: str = Field(description="Short human-readable label")
    utterances: tuple[str, ...] = Field(
        default=(),
        description="Example phrases a user might type for this intent",
    )
    tags: tuple[str, ...] = Field(
        default=(),
        description="Keywords associated with the intent (treated as a set)",
    )
    answer: str = Field(default="", description="Answer text shown on a match")
    links: tuple[IntentLink, ...] = Field(default=())
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = {
        "frozen": True,
        "json_schema_extra": {"examples": [
            {
                "id": "resume",
                "title": "Resume",
                "utterances": ["resume", "cv", "download resume"],
                "tags": ["resume", "cv", "pdf"],
                "answer": "You can download my resume as a PDF.",
                "links": [{"label": "Download Resume", "href": "/docs/resume.pdf"}],
            }
        ]},
    }

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, tags: tuple[str, ...]) -> tuple[str, ...]:
        # Blank tags would be contained in every token.
        cleaned = (tag.strip() for tag in tags)
        return tuple(dict.fromkeys(tag for tag in cleaned if tag))

    @property
    def is_reachable(self) -> bool:
        """Whether the intent has anything to match against."""
        return bool(self.utterances or self.tags)
