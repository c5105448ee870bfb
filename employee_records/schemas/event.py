from pydantic import BaseModel, ConfigDict
from datetime import date, datetime
from typing import Optional

class EventCreate(BaseModel):
    title: str
    date: date
    description: Optional[str] = None
    event_type: Optional[str] = None

class EventResponse(EventCreate):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
