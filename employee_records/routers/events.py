from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from employee_records.core.schemas import DeleteResponse
from employee_records.database import get_db
from employee_records.schemas.event import EventCreate, EventResponse
from employee_records.services.event_service import EventService

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=List[EventResponse])
def list_events(db: Session = Depends(get_db)):
    return EventService(db).list()


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event(data: EventCreate, db: Session = Depends(get_db)):
    return EventService(db).create(data)


@router.delete("/{id}", response_model=DeleteResponse)
def delete_event(id: int, db: Session = Depends(get_db)):
    return DeleteResponse(deleted=EventService(db).delete(id))
