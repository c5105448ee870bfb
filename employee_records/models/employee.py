"""
Employee Model.
`id` is the internal surrogate key used by update/delete; `employee_id` is the
business key used by login, leave and document lookups.
"""
from sqlalchemy import Column, Integer, String, Date, DateTime
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from employee_records.database import Base


class Employee(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(String, unique=True, index=True, nullable=True)
    name = Column(String, nullable=False)
    designation = Column(String, nullable=True)
    dob = Column(Date, nullable=True)
    joining_date = Column(Date, nullable=True)
    payroll_name = Column(String, nullable=True)
    team = Column(String, nullable=True)
    grade = Column(String, nullable=True)
    profile_image = Column(String, nullable=True)  # URL returned by the file storage
    password = Column(String, nullable=True)  # salted hash, never plaintext

    # Leave balances
    pl = Column(Integer, default=0, server_default="0", nullable=False)
    cl = Column(Integer, default=0, server_default="0", nullable=False)
    sl = Column(Integer, default=0, server_default="0", nullable=False)
    el = Column(Integer, default=0, server_default="0", nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    documents = relationship(
        "EmployeeDocument",
        back_populates="employee",
        uselist=False,
        cascade="all, delete-orphan",
        passive_updates=False,
    )

    def __repr__(self):
        return f"<Employee {self.employee_id}: {self.name}>"
