"""
Data models for api gateway
"""

from .chat import (
    SentimentResult, IntentResult, ChatMessageRequest, ChatReply, ChatResponse,
    build_chat_envelope, parse_chat_reply, fallback_chat_reply, reconcile_reply_text
)
from .journal import JournalEntryCreate
from .emotion import EmotionEntryCreate
from .auth import RegisterRequest, LoginRequest

__all__ = [
    "SentimentResult",
    "IntentResult",
    "ChatMessageRequest",
    "ChatReply",
    "ChatResponse",
    "build_chat_envelope",
    "parse_chat_reply",
    "fallback_chat_reply",
    "reconcile_reply_text",
    "JournalEntryCreate",
    "EmotionEntryCreate",
    "RegisterRequest",
    "LoginRequest",
]
