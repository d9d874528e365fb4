"""
Emotion tracking routes, proxied to the emotion service

Public unless EMOTIONS_REQUIRE_AUTH is set; user_id is always required.
"""

from typing import Optional

from fastapi import APIRouter, Query, status

from app.models.emotion import EmotionEntryCreate
from app.utils.dependencies import Clients, EmotionsCaller
from app.utils.errors import MissingFieldError

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_emotion(body: EmotionEntryCreate, caller: EmotionsCaller, clients: Clients):
    """Create a new emotion entry"""
    if not body.emotion or not body.intensity or not body.user_id:
        raise MissingFieldError("Emotion, intensity, and user_id are required")

    return await clients.emotion.create_entry(body.user_id, body.emotion, body.intensity, body.notes)


@router.get("")
async def list_emotions(
    caller: EmotionsCaller,
    clients: Clients,
    user_id: Optional[str] = Query(None),
    limit: int = Query(100, ge=1),
):
    """Emotion entries for a user"""
    if not user_id:
        raise MissingFieldError("user_id is required")

    return await clients.emotion.list_entries(user_id, limit)


@router.get("/stats")
async def emotion_stats(
    caller: EmotionsCaller,
    clients: Clients,
    user_id: Optional[str] = Query(None),
    days: int = Query(30, ge=1),
):
    """Emotion statistics over the last N days"""
    if not user_id:
        raise MissingFieldError("user_id is required")

    return await clients.emotion.get_stats(user_id, days)


@router.get("/by-type")
async def emotions_by_type(
    caller: EmotionsCaller,
    clients: Clients,
    user_id: Optional[str] = Query(None),
    emotion_type: Optional[str] = Query(None),
):
    """Emotion entries of one type"""
    if not user_id or not emotion_type:
        raise MissingFieldError("user_id and emotion_type are required")

    return await clients.emotion.get_by_type(user_id, emotion_type)
