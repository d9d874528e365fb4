"""
Upstream client registry

One client per upstream capability, built once from settings and shared by
every request for the lifetime of the process.
"""

from dataclasses import dataclass, fields
from typing import Iterator, Optional

import httpx

from app.config import Settings
from app.utils.auth_client import AuthClient
from app.utils.emotion_client import EmotionClient
from app.utils.intent_client import IntentClient
from app.utils.journal_client import JournalClient
from app.utils.rag_client import RagClient
from app.utils.sentiment_client import SentimentClient
from app.utils.service_client import ServiceClient


@dataclass
class ServiceClients:
    auth: AuthClient
    sentiment: SentimentClient
    intent: IntentClient
    rag: RagClient
    journal: JournalClient
    emotion: EmotionClient

    def __iter__(self) -> Iterator[ServiceClient]:
        for field in fields(self):
            yield getattr(self, field.name)

    async def start(self):
        for client in self:
            await client.start()

    async def stop(self):
        for client in self:
            await client.stop()


def build_service_clients(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> ServiceClients:
    """Create every upstream client from settings"""
    return ServiceClients(
        auth=AuthClient(settings.auth_service_url, timeout=settings.auth_timeout, transport=transport),
        sentiment=SentimentClient(
            settings.sentiment_service_url, timeout=settings.sentiment_timeout, transport=transport
        ),
        intent=IntentClient(settings.intent_service_url, timeout=settings.intent_timeout, transport=transport),
        rag=RagClient(
            settings.rag_service_url,
            timeout=settings.chat_timeout,
            transport=transport,
            retrieve_timeout=settings.retrieve_timeout,
            fallback_message=settings.chat_fallback_message,
            fallback_enabled=settings.chat_fallback_enabled,
            forward_analysis=settings.rag_forward_analysis,
        ),
        journal=JournalClient(
            settings.journal_base_url,
            timeout=settings.journal_timeout,
            transport=transport,
            create_timeout=settings.journal_create_timeout,
        ),
        emotion=EmotionClient(settings.emotion_base_url, timeout=settings.emotion_timeout, transport=transport),
    )
