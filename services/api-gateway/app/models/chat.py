"""
Chat pipeline data models and schemas
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SentimentLabel(str, Enum):
    """Sentiment labels produced by the sentiment-analysis service"""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


def _with_text(payload: Any, text: str) -> Any:
    if isinstance(payload, dict) and not payload.get("text"):
        return {**payload, "text": text}
    return payload


class SentimentScores(BaseModel):
    model_config = ConfigDict(extra="allow")

    positive: float = Field(..., ge=0.0, le=1.0)
    negative: float = Field(..., ge=0.0, le=1.0)
    neutral: float = Field(..., ge=0.0, le=1.0)


class SentimentResult(BaseModel):
    """Output of sentiment-analysis service; unknown fields and labels are kept"""
    model_config = ConfigDict(extra="allow")

    text: str
    sentiment: str
    scores: SentimentScores
    compound: float = Field(..., ge=-1.0, le=1.0)

    @classmethod
    def from_payload(cls, payload: Any, text: str) -> "SentimentResult":
        """Validate an upstream answer; text defaults to the analysed message"""
        return cls.model_validate(_with_text(payload, text))

    @classmethod
    def neutral(cls, text: str) -> "SentimentResult":
        """Default used when the sentiment service cannot answer"""
        return cls(
            text=text,
            sentiment=SentimentLabel.NEUTRAL.value,
            scores=SentimentScores(positive=0.33, negative=0.33, neutral=0.34),
            compound=0.0,
        )


class IntentResult(BaseModel):
    """Output of intent-recognition service; unknown fields are kept"""
    model_config = ConfigDict(extra="allow")

    text: str
    primary_intent: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    all_intents: Dict[str, float] = Field(default_factory=dict)
    is_emergency: bool = False

    @classmethod
    def from_payload(cls, payload: Any, text: str) -> "IntentResult":
        return cls.model_validate(_with_text(payload, text))

    @classmethod
    def seeking_advice(cls, text: str) -> "IntentResult":
        """Default used when the intent service cannot answer"""
        return cls(
            text=text,
            primary_intent="seeking_advice",
            confidence=0.8,
            all_intents={
                "seeking_advice": 0.8,
                "venting": 0.2,
                "greeting": 0.0,
                "farewell": 0.0,
                "gratitude": 0.0,
                "emergency": 0.0,
            },
            is_emergency=False,
        )


class ChatMessageRequest(BaseModel):
    """Body of POST /api/chat/message; numeric conversation ids are kept as strings"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    message: Optional[str] = None
    conversation_id: Optional[str] = None


class ChatReply(BaseModel):
    """Reply of the RAG chat service after response/message reconciliation"""
    response: str
    message: str
    sources: List[Any] = Field(default_factory=list)
    conversation_id: Optional[str] = None
    processing_time_ms: Optional[float] = None
    timestamp: Optional[str] = None
    fallback: bool = False


class ChatResponse(BaseModel):
    """Envelope returned by POST /api/chat/message"""
    response: str
    message: str
    sources: List[Any] = Field(default_factory=list)
    sentiment: SentimentResult
    intent: IntentResult
    conversation_id: Optional[str] = None
    processing_time_ms: float
    timestamp: str


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def reconcile_reply_text(payload: Dict[str, Any], fallback_text: str) -> str:
    """
    Pick the single reply text from an upstream payload.

    "response" wins over "message" when both are present; whichever is
    present fills both keys of the envelope. An upstream that supplies
    neither gets the fallback text.
    """
    for key in ("response", "message"):
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return fallback_text


def parse_chat_reply(payload: Any, fallback_text: str) -> ChatReply:
    """
    Reshape a raw RAG /chat payload into a ChatReply

    Only a non-object payload is rejected. Metadata of the wrong type is
    dropped so the envelope falls back to local values; the reply text is
    never discarded because of it.
    """
    if not isinstance(payload, dict):
        raise ValueError("chat payload must be a JSON object")

    text = reconcile_reply_text(payload, fallback_text)

    conversation_id = payload.get("conversation_id")
    sources = payload.get("sources")
    processing_time_ms = payload.get("processing_time_ms")
    if isinstance(processing_time_ms, bool) or not isinstance(processing_time_ms, (int, float)):
        processing_time_ms = None
    timestamp = payload.get("timestamp")
    if not isinstance(timestamp, str) or not timestamp:
        timestamp = None

    return ChatReply(
        response=text,
        message=text,
        sources=sources if isinstance(sources, list) else [],
        conversation_id=str(conversation_id) if conversation_id not in (None, "") else None,
        processing_time_ms=processing_time_ms,
        timestamp=timestamp,
    )


def fallback_chat_reply(fallback_text: str, conversation_id: Optional[str] = None) -> ChatReply:
    """Supportive reply used when the RAG chat service cannot answer"""
    return ChatReply(
        response=fallback_text,
        message=fallback_text,
        sources=[],
        conversation_id=conversation_id,
        processing_time_ms=0,
        timestamp=utc_timestamp(),
        fallback=True,
    )


def build_chat_envelope(
    reply: ChatReply,
    sentiment: SentimentResult,
    intent: IntentResult,
    conversation_id: Optional[str],
    elapsed_ms: float,
) -> ChatResponse:
    """
    Merge the chat reply with the locally gathered analysis results.

    The upstream conversation_id overrides the caller's; upstream timing
    fields are kept when present, otherwise the gateway's own measurement
    and the current time are used.
    """
    return ChatResponse(
        response=reply.response,
        message=reply.message,
        sources=list(reply.sources or []),
        sentiment=sentiment,
        intent=intent,
        conversation_id=reply.conversation_id or conversation_id,
        processing_time_ms=(
            reply.processing_time_ms if reply.processing_time_ms is not None else round(elapsed_ms, 2)
        ),
        timestamp=reply.timestamp or utc_timestamp(),
    )
