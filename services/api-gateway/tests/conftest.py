"""
Pytest fixtures for api-gateway tests
"""

from typing import Any, Dict

import httpx
import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import app
from app.utils.clients import build_service_clients
from app.utils.dependencies import get_clients

from upstream_fakes import FakeUpstream, make_token


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def transport(upstream) -> httpx.MockTransport:
    return httpx.MockTransport(upstream.handle)


@pytest.fixture
def clients(transport):
    return build_service_clients(settings, transport=transport)


@pytest.fixture
def client(clients):
    """Test client with upstream clients pointed at the fake upstream"""
    app.dependency_overrides[get_clients] = lambda: clients
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {make_token()}"}


@pytest.fixture
def sentiment_payload() -> Dict[str, Any]:
    return {
        "text": "I feel anxious about work",
        "sentiment": "negative",
        "scores": {"positive": 0.05, "negative": 0.8, "neutral": 0.15},
        "compound": -0.72,
    }


@pytest.fixture
def intent_payload() -> Dict[str, Any]:
    return {
        "text": "I feel anxious about work",
        "primary_intent": "venting",
        "confidence": 0.91,
        "all_intents": {"venting": 0.91, "seeking_advice": 0.09},
        "is_emergency": False,
    }


@pytest.fixture
def rag_payload() -> Dict[str, Any]:
    return {
        "response": "It sounds like work has been weighing on you.",
        "message": "It sounds like work has been weighing on you.",
        "sources": [{"title": "Coping with stress", "score": 0.82}],
        "conversation_id": "conv-from-rag",
        "processing_time_ms": 412.5,
        "timestamp": "2026-01-05T10:00:00+00:00",
    }
