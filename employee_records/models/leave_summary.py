from sqlalchemy import Column, Integer, String
from employee_records.database import Base

# Leave types that carry a counter in the summary
LEAVE_TYPES = ("pl", "cl", "sl", "el")

class LeaveSummary(Base):
    """Per-employee counter cache over leave_events."""
    __tablename__ = "leave_summary"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(String, unique=True, index=True, nullable=False)
    pl = Column(Integer, default=0, server_default="0", nullable=False)
    cl = Column(Integer, default=0, server_default="0", nullable=False)
    sl = Column(Integer, default=0, server_default="0", nullable=False)
    el = Column(Integer, default=0, server_default="0", nullable=False)
