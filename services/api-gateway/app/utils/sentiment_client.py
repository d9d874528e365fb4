"""
Sentiment Analysis Service Client
HTTP client for communication with sentiment-analysis service
"""

import structlog

from app.models.chat import SentimentResult
from app.utils.service_client import ServiceClient

logger = structlog.get_logger(__name__)


class SentimentClient(ServiceClient):
    """Degrading client: analysis failures yield a neutral sentiment"""

    service_name = "sentiment-analysis"

    async def analyze_sentiment(self, text: str) -> SentimentResult:
        """Analyze the sentiment of a text"""
        logger.debug("Calling sentiment analysis", base_url=self.base_url)
        return await self._request_or_default(
            "POST",
            "/analyze-sentiment",
            json={"text": text},
            parse=lambda data: SentimentResult.from_payload(data, text),
            default=lambda: SentimentResult.neutral(text),
        )
