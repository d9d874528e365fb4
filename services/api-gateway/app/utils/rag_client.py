"""
RAG Service Client
HTTP client for the retrieval-augmented chat service
"""

from typing import Any, Dict, Optional

import httpx
import structlog

from app.models.chat import (
    ChatReply, IntentResult, SentimentResult, fallback_chat_reply, parse_chat_reply
)
from app.utils.errors import UpstreamError
from app.utils.service_client import ServiceClient

logger = structlog.get_logger(__name__)


class RagClient(ServiceClient):
    """
    Client for rag-service chat and document retrieval.

    process_chat degrades to a supportive fallback reply unless the fallback
    is disabled, in which case it fails like any pass-through call.
    retrieve_documents is always pass-through.
    """

    service_name = "rag-service"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        *,
        retrieve_timeout: float = 10.0,
        fallback_message: str,
        fallback_enabled: bool = True,
        forward_analysis: bool = False,
    ):
        super().__init__(base_url, timeout=timeout, transport=transport)
        self.retrieve_timeout = retrieve_timeout
        self.fallback_message = fallback_message
        self.fallback_enabled = fallback_enabled
        self.forward_analysis = forward_analysis

    def build_chat_request(
        self,
        message: str,
        user_id: Optional[str],
        conversation_id: Optional[str],
        sentiment: Optional[SentimentResult] = None,
        intent: Optional[IntentResult] = None,
    ) -> Dict[str, Any]:
        """Request body for POST /chat"""
        request = {
            "messages": [{"role": "user", "content": message}],
            "user_id": user_id,
            "conversation_id": conversation_id,
            "include_sources": True,
        }
        if self.forward_analysis:
            if sentiment is not None:
                request["sentiment"] = sentiment.model_dump(mode="json")
            if intent is not None:
                request["intent"] = intent.model_dump(mode="json")
        return request

    async def process_chat(
        self,
        message: str,
        user_id: Optional[str],
        conversation_id: Optional[str] = None,
        sentiment: Optional[SentimentResult] = None,
        intent: Optional[IntentResult] = None,
    ) -> ChatReply:
        """Generate a reply for one user message"""
        payload = self.build_chat_request(message, user_id, conversation_id, sentiment, intent)
        logger.info(
            "Calling RAG chat",
            user_id=user_id,
            conversation_id=conversation_id or "new",
            forward_analysis=self.forward_analysis,
        )

        if not self.fallback_enabled:
            data = await self._request(
                "POST", "/chat", json=payload, error_message="Failed to process chat message"
            )
            try:
                return parse_chat_reply(data, self.fallback_message)
            except ValueError as e:
                logger.error("RAG chat payload rejected", error=str(e))
                raise UpstreamError("Failed to process chat message", service=self.service_name) from e

        return await self._request_or_default(
            "POST",
            "/chat",
            json=payload,
            parse=lambda data: parse_chat_reply(data, self.fallback_message),
            default=lambda: fallback_chat_reply(self.fallback_message, conversation_id),
        )

    async def retrieve_documents(self, query: str, k: int = 5) -> Any:
        """Retrieve documents relevant to a query"""
        return await self._request(
            "GET",
            "/retrieve",
            params={"query": query, "k": k},
            timeout=self.retrieve_timeout,
            error_message="Failed to retrieve resources",
        )
