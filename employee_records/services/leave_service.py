from typing import List, Optional

from employee_records.models.leave_event import LeaveEvent
from employee_records.models.leave_summary import LeaveSummary, LEAVE_TYPES
from employee_records.schemas.leave import (
    CalendarLeaveEvent,
    LeaveEventCreate,
    LeaveSummaryResponse,
)
from employee_records.services.base import BaseService


def counter_for(leave_type: Optional[str]) -> Optional[str]:
    """Summary column tracking `leave_type`, or None for untracked labels."""
    key = (leave_type or "").strip().lower()
    return key if key in LEAVE_TYPES else None


class LeaveService(BaseService):
    """
    Leave event log plus the per-employee summary counters derived from it.
    Every write touches both inside one transaction.
    """

    def _summary_row(self, employee_id: str) -> LeaveSummary:
        summary = (
            self.db.query(LeaveSummary)
            .filter(LeaveSummary.employee_id == employee_id)
            .with_for_update()
            .first()
        )
        if not summary:
            summary = LeaveSummary(employee_id=employee_id, pl=0, cl=0, sl=0, el=0)
            self.db.add(summary)
        return summary

    def record_leave_event(self, data: LeaveEventCreate) -> LeaveEvent:
        event = LeaveEvent(
            employee_id=data.employee_id,
            date=data.date,
            leave_type=data.leave_type,
            color=data.color,
        )
        counter = counter_for(data.leave_type)
        with self.transaction():
            self.db.add(event)
            if counter:
                summary = self._summary_row(data.employee_id)
                setattr(summary, counter, (getattr(summary, counter) or 0) + 1)
        self.db.refresh(event)
        self._logger.info(
            f"Recorded {data.leave_type} leave for {data.employee_id} on {data.date}"
        )
        return event

    def delete_leave_event(self, id: int) -> int:
        """Remove one event and give its day back to the summary counter."""
        event = self.db.get(LeaveEvent, id)
        if not event:
            return 0
        counter = counter_for(event.leave_type)
        with self.transaction():
            if counter:
                summary = self._summary_row(event.employee_id)
                setattr(summary, counter, max((getattr(summary, counter) or 0) - 1, 0))
            self.db.delete(event)
        return 1

    def get_leave_summary(self, employee_id: str) -> LeaveSummaryResponse:
        summary = (
            self.db.query(LeaveSummary)
            .filter(LeaveSummary.employee_id == employee_id)
            .first()
        )
        if not summary:
            return LeaveSummaryResponse(employee_id=employee_id)
        return LeaveSummaryResponse.model_validate(summary)

    def list_leave_events(self, employee_id: Optional[str] = None) -> List[CalendarLeaveEvent]:
        query = self.db.query(LeaveEvent)
        if employee_id:
            query = query.filter(LeaveEvent.employee_id == employee_id)
        events = query.order_by(LeaveEvent.date.asc(), LeaveEvent.id.asc()).all()
        return [
            CalendarLeaveEvent(
                id=e.id,
                employee_id=e.employee_id,
                start=e.date,
                title=e.leave_type,
                color=e.color,
            )
            for e in events
        ]
