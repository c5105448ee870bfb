from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from employee_records.core.schemas import DeleteResponse
from employee_records.database import get_db
from employee_records.schemas.leave import (
    CalendarLeaveEvent,
    LeaveEventCreate,
    LeaveEventResponse,
    LeaveSummaryResponse,
)
from employee_records.services.leave_service import LeaveService

router = APIRouter(tags=["leave"])

# The client calls both the bare and the /api-prefixed paths.

@router.get("/leave-events", response_model=List[CalendarLeaveEvent])
@router.get("/api/leave-events", response_model=List[CalendarLeaveEvent], include_in_schema=False)
def list_leave_events(employee_id: Optional[str] = None, db: Session = Depends(get_db)):
    return LeaveService(db).list_leave_events(employee_id)


@router.post("/leave-events", response_model=LeaveEventResponse, status_code=status.HTTP_201_CREATED)
@router.post(
    "/api/leave-events",
    response_model=LeaveEventResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_leave_event(data: LeaveEventCreate, db: Session = Depends(get_db)):
    """Record one leave day; pl/cl/sl/el (any case) also bump the summary counter."""
    return LeaveService(db).record_leave_event(data)


@router.delete("/leave-events/{id}", response_model=DeleteResponse)
@router.delete("/api/leave-events/{id}", response_model=DeleteResponse, include_in_schema=False)
def delete_leave_event(id: int, db: Session = Depends(get_db)):
    return DeleteResponse(deleted=LeaveService(db).delete_leave_event(id))


@router.get("/api/leaves/summary/{employee_id}", response_model=LeaveSummaryResponse)
def get_leave_summary(employee_id: str, db: Session = Depends(get_db)):
    return LeaveService(db).get_leave_summary(employee_id)
