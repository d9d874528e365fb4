"""
Emotion tracking request schemas
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class EmotionEntryCreate(BaseModel):
    """Body of POST /api/emotions; a numeric user_id is kept as a string"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    emotion: Optional[str] = None
    intensity: Optional[Union[int, float]] = None
    notes: Optional[str] = None
    user_id: Optional[str] = None
