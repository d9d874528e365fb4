"""
Journal request schemas
"""

from typing import List, Optional

from pydantic import BaseModel


class JournalEntryCreate(BaseModel):
    """Body of POST /api/journal; title and content are checked by the route"""
    title: Optional[str] = None
    content: Optional[str] = None
    mood: Optional[str] = None
    tags: Optional[List[str]] = None
