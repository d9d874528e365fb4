"""
Journal routes, proxied to the journal service
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import APIRouter, Body, Query, status

from app.models.journal import JournalEntryCreate
from app.utils.dependencies import Clients, CurrentUser
from app.utils.errors import MissingFieldError, NotFoundError
from app.utils.security import resolve_user_id

logger = structlog.get_logger(__name__)

router = APIRouter()

ENTRY_NOT_FOUND = "Journal entry not found"


def _positive_int(value: Optional[str], default: int) -> int:
    """Lenient query parsing: anything that is not a positive integer gives the default"""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_entry(body: JournalEntryCreate, user: CurrentUser, clients: Clients):
    """Create a new journal entry"""
    if not body.title or not body.content:
        raise MissingFieldError("Title and content are required")

    user_id = resolve_user_id(user)
    entry = {
        "user_id": user_id,
        "title": body.title,
        "content": body.content,
        "mood": body.mood,
        "tags": body.tags or [],
    }
    logger.info("Creating journal entry", user_id=user_id)
    return await clients.journal.create_entry(entry)


@router.get("")
async def list_entries(
    user: CurrentUser,
    clients: Clients,
    page: Optional[str] = Query(None),
    page_size: Optional[str] = Query(None, alias="pageSize"),
    tag: Optional[str] = Query(None),
    mood: Optional[str] = Query(None),
):
    """List journal entries for the caller"""
    return await clients.journal.list_entries(
        resolve_user_id(user),
        page=_positive_int(page, 1),
        page_size=_positive_int(page_size, 10),
        tag=tag,
        mood=mood,
    )


@router.get("/search")
async def search_entries(
    user: CurrentUser,
    clients: Clients,
    q: Optional[str] = Query(None, description="Search query"),
    limit: Optional[str] = Query(None),
):
    """Search the caller's journal entries"""
    if not q or not q.strip():
        raise MissingFieldError("Search query is required")

    return await clients.journal.search_entries(resolve_user_id(user), q, _positive_int(limit, 5))


@router.get("/{entry_id}")
async def get_entry(entry_id: str, user: CurrentUser, clients: Clients):
    """Get a specific journal entry"""
    lookup = await clients.journal.get_entry(resolve_user_id(user), entry_id)
    if not lookup.found or lookup.data is None:
        raise NotFoundError(ENTRY_NOT_FOUND)
    return lookup.data


@router.put("/{entry_id}")
async def update_entry(
    entry_id: str,
    user: CurrentUser,
    clients: Clients,
    updates: Dict[str, Any] = Body(...),
):
    """Update a journal entry"""
    lookup = await clients.journal.update_entry(resolve_user_id(user), entry_id, updates)
    if not lookup.found or lookup.data is None:
        raise NotFoundError(ENTRY_NOT_FOUND)
    return lookup.data


@router.delete("/{entry_id}")
async def delete_entry(entry_id: str, user: CurrentUser, clients: Clients):
    """Delete a journal entry"""
    lookup = await clients.journal.delete_entry(resolve_user_id(user), entry_id)
    if not lookup.found:
        raise NotFoundError(ENTRY_NOT_FOUND)
    return {"message": "Journal entry deleted successfully"}
