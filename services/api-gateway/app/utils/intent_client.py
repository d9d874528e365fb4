"""
Intent Recognition Service Client
HTTP client for communication with intent-recognition service
"""

import structlog

from app.models.chat import IntentResult
from app.utils.service_client import ServiceClient

logger = structlog.get_logger(__name__)


class IntentClient(ServiceClient):
    """Degrading client: recognition failures yield a seeking_advice intent"""

    service_name = "intent-recognition"

    async def recognize_intent(self, text: str) -> IntentResult:
        """Recognize the intent of a text"""
        logger.debug("Calling intent recognition", base_url=self.base_url)
        return await self._request_or_default(
            "POST",
            "/recognize-intent",
            json={"text": text},
            parse=lambda data: IntentResult.from_payload(data, text),
            default=lambda: IntentResult.seeking_advice(text),
        )
