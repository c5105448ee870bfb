from sqlalchemy import Column, Integer, String, Date, Text, DateTime
from sqlalchemy.sql import func
from employee_records.database import Base

class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=True)
    event_type = Column(String, nullable=True)  # e.g. "holiday", "meeting"
    created_at = Column(DateTime(timezone=True), server_default=func.now())
