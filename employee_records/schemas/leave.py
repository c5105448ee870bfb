from pydantic import BaseModel, ConfigDict
from datetime import date, datetime
from typing import Optional

class LeaveEventCreate(BaseModel):
    employee_id: str
    date: date
    leave_type: str
    color: Optional[str] = None

class LeaveEventResponse(BaseModel):
    id: int
    employee_id: str
    date: date
    leave_type: str
    color: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class CalendarLeaveEvent(BaseModel):
    """Leave event shaped for the calendar widget (date -> start, leave_type -> title)."""
    id: int
    employee_id: str
    start: date
    title: str
    color: Optional[str] = None

class LeaveSummaryResponse(BaseModel):
    employee_id: str
    pl: int = 0
    cl: int = 0
    sl: int = 0
    el: int = 0

    model_config = ConfigDict(from_attributes=True)
