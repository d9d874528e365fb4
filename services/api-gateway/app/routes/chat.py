"""
Chat routes
"""

from typing import Optional

from fastapi import APIRouter, Query

from app.models.chat import ChatMessageRequest, ChatResponse
from app.utils.dependencies import ChatService, Clients, CurrentUser
from app.utils.errors import MissingFieldError

router = APIRouter()


@router.post("/message", response_model=ChatResponse)
async def send_message(body: ChatMessageRequest, user: CurrentUser, chat: ChatService):
    """Process a chat message through the sentiment, intent and RAG pipeline"""
    return await chat.process_message(body.message, body.conversation_id, user)


@router.get("/history")
async def get_history(user: CurrentUser):
    """Chat history for the caller; not stored by any upstream yet"""
    return {
        "history": [],
        "message": "Chat history endpoint - to be implemented"
    }


@router.get("/resources")
async def get_resources(
    user: CurrentUser,
    clients: Clients,
    query: Optional[str] = Query(None, description="Search query"),
    limit: int = Query(5, ge=1, description="Maximum number of documents"),
):
    """Documents relevant to a query"""
    if not query or not query.strip():
        raise MissingFieldError("Query parameter is required")

    documents = await clients.rag.retrieve_documents(query, limit)
    return {"resources": documents}
