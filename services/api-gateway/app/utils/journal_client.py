"""
Journal Service Client
HTTP client for journal storage (hosted by rag-service by default)
"""

from typing import Any, Dict, Optional

import httpx

from app.utils.service_client import Lookup, ServiceClient


class JournalClient(ServiceClient):
    """Pass-through client; single-entry calls return a Lookup"""

    service_name = "journal"

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        *,
        create_timeout: float = 10.0,
    ):
        super().__init__(base_url, timeout=timeout, transport=transport)
        self.create_timeout = create_timeout

    async def create_entry(self, entry: Dict[str, Any]) -> Any:
        return await self._request(
            "POST",
            "/journal",
            json=entry,
            timeout=self.create_timeout,
            error_message="Failed to create journal entry",
        )

    async def list_entries(
        self,
        user_id: str,
        page: int = 1,
        page_size: int = 10,
        tag: Optional[str] = None,
        mood: Optional[str] = None,
    ) -> Any:
        params: Dict[str, Any] = {"page": page, "page_size": page_size}
        if tag:
            params["tag"] = tag
        if mood:
            params["mood"] = mood

        return await self._request(
            "GET",
            f"/journal/{user_id}",
            params=params,
            error_message="Failed to list journal entries",
        )

    async def search_entries(self, user_id: str, query: str, limit: int = 5) -> Any:
        return await self._request(
            "GET",
            f"/journal/{user_id}/search",
            params={"query": query, "limit": limit},
            error_message="Failed to search journal entries",
        )

    async def get_entry(self, user_id: str, entry_id: str) -> Lookup:
        return await self._lookup(
            "GET",
            f"/journal/{user_id}/{entry_id}",
            error_message="Failed to get journal entry",
        )

    async def update_entry(self, user_id: str, entry_id: str, updates: Dict[str, Any]) -> Lookup:
        return await self._lookup(
            "PUT",
            f"/journal/{user_id}/{entry_id}",
            json=updates,
            error_message="Failed to update journal entry",
        )

    async def delete_entry(self, user_id: str, entry_id: str) -> Lookup:
        return await self._lookup(
            "DELETE",
            f"/journal/{user_id}/{entry_id}",
            error_message="Failed to delete journal entry",
        )
