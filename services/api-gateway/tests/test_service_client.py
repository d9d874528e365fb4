"""
Tests for the upstream client failure policies
"""

import httpx
import pytest

from app.models.chat import IntentResult, SentimentResult
from app.utils.errors import UpstreamError
from app.utils.intent_client import IntentClient
from app.utils.journal_client import JournalClient
from app.utils.rag_client import RagClient
from app.utils.sentiment_client import SentimentClient

from upstream_fakes import FakeUpstream, INTENT_HOST, RAG_HOST, SENTIMENT_HOST


@pytest.fixture
def fake():
    return FakeUpstream()


@pytest.fixture
def transport(fake):
    return httpx.MockTransport(fake.handle)


class TestDegradingCalls:
    @pytest.mark.asyncio
    async def test_sentiment_success_is_passed_through(self, fake, transport):
        payload = {
            "text": "great day",
            "sentiment": "positive",
            "scores": {"positive": 0.9, "negative": 0.02, "neutral": 0.08},
            "compound": 0.88,
        }
        fake.add("POST", SENTIMENT_HOST, "/analyze-sentiment", json_body=payload)
        client = SentimentClient("http://sentiment-analysis:8000", timeout=5.0, transport=transport)

        result = await client.analyze_sentiment("great day")

        assert result.model_dump() == payload

    @pytest.mark.asyncio
    async def test_sentiment_invalid_payload_uses_default(self, fake, transport):
        fake.add("POST", SENTIMENT_HOST, "/analyze-sentiment", json_body={"unexpected": True})
        client = SentimentClient("http://sentiment-analysis:8000", transport=transport)

        result = await client.analyze_sentiment("great day")

        assert result == SentimentResult.neutral("great day")

    @pytest.mark.asyncio
    async def test_intent_timeout_uses_default(self, fake, transport):
        fake.add("POST", INTENT_HOST, "/recognize-intent", exc=httpx.ConnectTimeout)
        client = IntentClient("http://intent-recognition:8001", transport=transport)

        result = await client.recognize_intent("help")

        assert result == IntentResult.seeking_advice("help")
        assert result.all_intents["venting"] == 0.2

    @pytest.mark.asyncio
    async def test_started_client_is_reused(self, fake, transport):
        fake.add("POST", INTENT_HOST, "/recognize-intent", status_code=502)
        client = IntentClient("http://intent-recognition:8001", transport=transport)

        await client.start()
        try:
            shared = client._client
            await client.recognize_intent("one")
            await client.recognize_intent("two")
            assert client._client is shared
        finally:
            await client.stop()

        assert client._client is None
        assert len(fake.calls_to(INTENT_HOST)) == 2


class TestRagClient:
    def _client(self, transport, **kwargs):
        return RagClient(
            "http://rag-service:8002",
            transport=transport,
            fallback_message="fallback text",
            **kwargs
        )

    @pytest.mark.asyncio
    async def test_fallback_on_error_status(self, fake, transport):
        fake.add("POST", RAG_HOST, "/chat", status_code=500, json_body={"detail": "boom"})

        reply = await self._client(transport).process_chat("hi", user_id="u1", conversation_id="c1")

        assert reply.fallback is True
        assert reply.response == reply.message == "fallback text"
        assert reply.sources == []
        assert reply.conversation_id == "c1"

    @pytest.mark.asyncio
    async def test_fallback_disabled_raises(self, fake, transport):
        fake.add("POST", RAG_HOST, "/chat", exc=httpx.ReadTimeout)

        with pytest.raises(UpstreamError) as exc_info:
            await self._client(transport, fallback_enabled=False).process_chat("hi", user_id="u1")

        assert exc_info.value.unavailable
        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_forward_analysis(self, fake, transport):
        fake.add("POST", RAG_HOST, "/chat", json_body={"response": "ok"})
        sentiment = SentimentResult.neutral("hi")
        intent = IntentResult.seeking_advice("hi")

        await self._client(transport, forward_analysis=True).process_chat(
            "hi", user_id="u1", sentiment=sentiment, intent=intent
        )

        body = fake.last_json(RAG_HOST, "/chat")
        assert body["sentiment"]["sentiment"] == "neutral"
        assert body["intent"]["primary_intent"] == "seeking_advice"

    def test_analysis_not_forwarded_by_default(self):
        request = self._client(None).build_chat_request(
            "hi", "u1", None, SentimentResult.neutral("hi"), IntentResult.seeking_advice("hi")
        )
        assert "sentiment" not in request
        assert "intent" not in request


class TestPassThroughCalls:
    @pytest.mark.asyncio
    async def test_error_status_and_body_are_kept(self, fake, transport):
        fake.add("GET", RAG_HOST, "/journal/u1", status_code=422, json_body={"detail": "bad page"})
        client = JournalClient("http://rag-service:8002", transport=transport)

        with pytest.raises(UpstreamError) as exc_info:
            await client.list_entries("u1")

        error = exc_info.value
        assert error.status_code == 422
        assert error.upstream_body == {"detail": "bad page"}
        assert error.to_body() == {"detail": "bad page"}

    @pytest.mark.asyncio
    async def test_unreachable_is_unavailable(self, fake, transport):
        client = JournalClient("http://rag-service:8002", transport=transport)

        with pytest.raises(UpstreamError) as exc_info:
            await client.search_entries("u1", "sleep")

        assert exc_info.value.unavailable
        assert exc_info.value.to_body() == {"error": "Failed to search journal entries"}

    @pytest.mark.asyncio
    async def test_lookup_not_found(self, fake, transport):
        fake.add("GET", RAG_HOST, "/journal/u1/e1", status_code=404, json_body={"detail": "missing"})
        client = JournalClient("http://rag-service:8002", transport=transport)

        lookup = await client.get_entry("u1", "e1")

        assert lookup.found is False
        assert lookup.data is None

    @pytest.mark.asyncio
    async def test_lookup_failure_still_raises(self, fake, transport):
        fake.add("DELETE", RAG_HOST, "/journal/u1/e1", status_code=500)
        client = JournalClient("http://rag-service:8002", transport=transport)

        with pytest.raises(UpstreamError) as exc_info:
            await client.delete_entry("u1", "e1")

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_empty_body_is_none(self, fake, transport):
        fake.add("DELETE", RAG_HOST, "/journal/u1/e1", status_code=204)
        client = JournalClient("http://rag-service:8002", transport=transport)

        lookup = await client.delete_entry("u1", "e1")

        assert lookup.found is True
        assert lookup.data is None
