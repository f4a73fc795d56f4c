"""API routes for the FAQ matcher."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from faq_matcher.assistant import AssistantReply, FaqAssistant, Suggestion
from faq_matcher.config import get_settings
from faq_matcher.exceptions import IntentValidationError
from faq_matcher.models.intent import Intent
from faq_matcher.models.response import IntentScore

router = APIRouter()


def get_assistant(request: Request) -> FaqAssistant:
    """Get the assistant attached to the app during startup."""
    assistant = getattr(request.app.state, "assistant", None)
    if assistant is None:
        raise HTTPException(
            status_code=503,
            detail="Assistant not initialized",
        )
    return assistant


class MatchRequest(BaseModel):
    """Request body for the match endpoint."""

    query: str = Field(description="Free-text user query (blank is allowed)")
    threshold: float | None = Field(
        default=None,
        ge=0.0,
        description="Override of the configured match threshold",
    )

    model_config = {"json_schema_extra": {"examples": [
        {"query": "show me your cv"},
    ]}}


class MatchResponse(BaseModel):
    """Single-intent match decision."""

    matched: bool
    intent_id: str | None = None
    title: str | None = None
    score: float = Field(description="Best combined score (can exceed 1.0)")
    threshold: float
    normalized_query: str


class ExplainRequest(BaseModel):
    """Request body for the explain endpoint."""

    query: str
    threshold: float | None = Field(default=None, ge=0.0)
    top_k: int = Field(default=5, ge=1, le=100)


class ExplainResponse(MatchResponse):
    """Match decision with per-intent score breakdowns, best first."""

    scores: list[IntentScore]


class ChatRequest(BaseModel):
    """Request body for the chat endpoint."""

    message: str = Field(description="The visitor's chat message")


class IntentSummary(BaseModel):
    """Catalog listing entry."""

    id: str
    title: str
    utterances: int
    tags: int
    reachable: bool


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    catalog_stats: dict[str, Any] | None = None


def _match_response(assistant: FaqAssistant, body: MatchRequest | ExplainRequest, top_k: int):
    result = assistant.classify(body.query, threshold=body.threshold, top_k=top_k)
    fields = {
        "matched": result.is_match,
        "intent_id": result.intent.id if result.intent else None,
        "title": result.intent.title if result.intent else None,
        "score": result.best_score,
        "threshold": result.threshold,
        "normalized_query": result.normalized_query,
    }
    return result, fields


@router.post(
    "/v1/match",
    response_model=MatchResponse,
    summary="Match a query to an FAQ intent",
    description="Return the single best intent for a query, or matched=false.",
)
async def match_query(
    body: MatchRequest,
    assistant: FaqAssistant = Depends(get_assistant),
) -> MatchResponse:
    _, fields = _match_response(assistant, body, top_k=0)
    return MatchResponse(**fields)


@router.post(
    "/v1/match/explain",
    response_model=ExplainResponse,
    summary="Explain a match decision",
    description="Return the match decision with the top scoring intents and their score components.",
)
async def explain_query(
    body: ExplainRequest,
    assistant: FaqAssistant = Depends(get_assistant),
) -> ExplainResponse:
    result, fields = _match_response(assistant, body, top_k=body.top_k)
    return ExplainResponse(**fields, scores=result.scores)


@router.post(
    "/v1/chat",
    response_model=AssistantReply,
    summary="Send a chat message",
    description="Answer a visitor message, or fall back to quick-reply suggestions.",
)
async def chat(
    body: ChatRequest,
    assistant: FaqAssistant = Depends(get_assistant),
) -> AssistantReply:
    reply = assistant.reply(body.message)
    if reply is None:
        raise IntentValidationError("Message must not be blank")
    return reply


@router.get("/v1/chat/intro", response_model=AssistantReply, summary="Greeting message")
async def chat_intro(assistant: FaqAssistant = Depends(get_assistant)) -> AssistantReply:
    return assistant.intro()


@router.get(
    "/v1/chat/suggestions",
    response_model=list[Suggestion],
    summary="Quick-reply suggestions",
)
async def chat_suggestions(assistant: FaqAssistant = Depends(get_assistant)) -> list[Suggestion]:
    return assistant.suggestions()


@router.post(
    "/v1/chat/quick-reply/{intent_id}",
    response_model=AssistantReply,
    summary="Answer a quick-reply click",
)
async def chat_quick_reply(
    intent_id: str,
    assistant: FaqAssistant = Depends(get_assistant),
) -> AssistantReply:
    return assistant.reply_for_intent(intent_id)


@router.get("/v1/intents", response_model=list[IntentSummary], summary="List intents")
async def list_intents(assistant: FaqAssistant = Depends(get_assistant)) -> list[IntentSummary]:
    return [
        IntentSummary(
            id=intent.id,
            title=intent.title,
            utterances=len(intent.utterances),
            tags=len(intent.tags),
            reachable=intent.is_reachable,
        )
        for intent in assistant.catalog
    ]


@router.get("/v1/intents/{intent_id}", response_model=Intent, summary="Get one intent")
async def get_intent(
    intent_id: str,
    assistant: FaqAssistant = Depends(get_assistant),
) -> Intent:
    return assistant.catalog.get(intent_id)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy and ready to accept requests.",
)
async def health_check(
    assistant: FaqAssistant = Depends(get_assistant),
) -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        version=settings.api_version,
        catalog_stats=assistant.catalog.get_catalog_stats(),
    )
