from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class HighscoreCreate(BaseModel):
    user_id: Optional[int] = None
    guest_name: Optional[str] = None
    score: Optional[int] = None
    mode: Optional[str] = None


class HighscoreOut(BaseModel):
    name: Optional[str] = None
    score: int
    mode: str
    created_at: datetime

    class Config:
        from_attributes = True
