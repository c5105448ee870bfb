from typing import List

from employee_records.models.event import Event
from employee_records.schemas.event import EventCreate
from employee_records.services.base import BaseService


class EventService(BaseService):
    def list(self) -> List[Event]:
        return self.db.query(Event).order_by(Event.date.asc(), Event.id.asc()).all()

    def create(self, data: EventCreate) -> Event:
        event = Event(**data.model_dump())
        with self.transaction():
            self.db.add(event)
        self.db.refresh(event)
        return event

    def delete(self, id: int) -> int:
        event = self.db.get(Event, id)
        if not event:
            return 0
        with self.transaction():
            self.db.delete(event)
        return 1
