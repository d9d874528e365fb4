"""
Business logic services for api gateway
"""

from .chat_service import ChatOrchestrator

__all__ = ["ChatOrchestrator"]
