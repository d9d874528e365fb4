"""
Emotion Tracking Service Client
HTTP client for emotion entries (hosted by rag-service by default)
"""

from typing import Any, Dict, Optional

from app.utils.service_client import ServiceClient


class EmotionClient(ServiceClient):
    """Pass-through client for emotion entries and statistics"""

    service_name = "emotion"

    async def create_entry(self, user_id: str, emotion: str, intensity: Any, notes: Optional[str] = None) -> Any:
        return await self._request(
            "POST",
            "/emotions",
            json={"emotion": emotion, "intensity": intensity, "notes": notes},
            params={"user_id": user_id},
            error_message="Failed to create emotion entry",
        )

    async def list_entries(self, user_id: str, limit: int = 100) -> Any:
        return await self._request(
            "GET",
            "/emotions",
            params={"user_id": user_id, "limit": limit},
            error_message="Failed to get emotion entries",
        )

    async def get_stats(self, user_id: str, days: int = 30) -> Any:
        return await self._request(
            "GET",
            "/emotions/stats",
            params={"user_id": user_id, "days": days},
            error_message="Failed to get emotion statistics",
        )

    async def get_by_type(self, user_id: str, emotion_type: str) -> Any:
        params: Dict[str, Any] = {"user_id": user_id, "emotion_type": emotion_type}
        return await self._request(
            "GET",
            "/emotions/by-type",
            params=params,
            error_message="Failed to get emotions by type",
        )
