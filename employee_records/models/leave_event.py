from sqlalchemy import Column, Integer, String, Date, DateTime
from sqlalchemy.sql import func
from employee_records.database import Base

class LeaveEvent(Base):
    __tablename__ = "leave_events"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(String, index=True, nullable=False)
    date = Column(Date, nullable=False)
    leave_type = Column(String, nullable=False)  # pl / cl / sl / el, any case; other labels are kept but not counted
    color = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
