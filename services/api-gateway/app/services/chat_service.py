"""
Chat orchestration

Turns one user message into one ChatResponse:
1. sentiment analysis and intent recognition, run concurrently
2. RAG chat generation, started once both analysis results exist
3. merge of the chat reply with both analysis results
"""

import asyncio
import time
from typing import Any, Dict, Optional

import structlog

from app.models.chat import ChatResponse, build_chat_envelope
from app.utils.errors import MissingFieldError
from app.utils.intent_client import IntentClient
from app.utils.rag_client import RagClient
from app.utils.security import resolve_user_id
from app.utils.sentiment_client import SentimentClient

logger = structlog.get_logger(__name__)


class ChatOrchestrator:
    """Stateless facade over the three chat pipeline clients"""

    def __init__(self, sentiment: SentimentClient, intent: IntentClient, rag: RagClient):
        self.sentiment = sentiment
        self.intent = intent
        self.rag = rag

    async def process_message(
        self,
        message: Optional[str],
        conversation_id: Optional[str],
        user: Dict[str, Any],
    ) -> ChatResponse:
        """Run the full chat pipeline for one message"""
        if not message or not message.strip():
            raise MissingFieldError("Message is required")

        started = time.perf_counter()
        user_id = resolve_user_id(user)
        logger.info("Processing chat message", user_id=user_id, conversation_id=conversation_id or "new")

        # Sentiment and intent never raise; failures come back as defaults
        sentiment, intent = await asyncio.gather(
            self.sentiment.analyze_sentiment(message),
            self.intent.recognize_intent(message),
        )

        reply = await self.rag.process_chat(
            message,
            user_id=user_id,
            conversation_id=conversation_id,
            sentiment=sentiment,
            intent=intent,
        )
        if reply.fallback:
            logger.warning("Chat reply is the configured fallback", user_id=user_id)

        elapsed_ms = (time.perf_counter() - started) * 1000
        envelope = build_chat_envelope(reply, sentiment, intent, conversation_id, elapsed_ms)

        logger.info(
            "Chat message processed",
            user_id=user_id,
            conversation_id=envelope.conversation_id,
            sentiment=envelope.sentiment.sentiment,
            primary_intent=envelope.intent.primary_intent,
            is_emergency=envelope.intent.is_emergency,
            sources=len(envelope.sources),
            elapsed_ms=round(elapsed_ms, 2),
        )
        return envelope
