"""
API routes for api gateway
"""

from . import auth, chat, journal, emotions

__all__ = ["auth", "chat", "journal", "emotions"]
