from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from employee_records.core.exceptions import ConflictError, NotFoundError, ValidationError
from employee_records.core.security import get_password_hash
from employee_records.models.employee import Employee
from employee_records.models.employee_document import EmployeeDocument
from employee_records.models.leave_event import LeaveEvent
from employee_records.models.leave_summary import LEAVE_TYPES, LeaveSummary
from employee_records.schemas.employee import EmployeeCreate, EmployeeUpdate
from employee_records.services.base import BaseService


def is_unique_violation(error: IntegrityError) -> bool:
    """True for duplicate-key failures on SQLite and PostgreSQL."""
    if getattr(error.orig, "pgcode", None) == "23505":
        return True
    message = str(error.orig).lower()
    return "unique constraint" in message or "duplicate key" in message


class EmployeeService(BaseService):
    """CRUD over the employees table."""

    def list(self) -> List[Employee]:
        return self.db.query(Employee).order_by(Employee.id.asc()).all()

    def get(self, id: int) -> Employee:
        employee = self.db.get(Employee, id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def get_by_business_id(self, employee_id: str) -> Employee:
        employee = self.find_by_business_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def find_by_business_id(self, employee_id: str) -> Optional[Employee]:
        return self.db.query(Employee).filter(Employee.employee_id == employee_id).first()

    def ensure_business_id_free(self, employee_id: Optional[str], exclude_id: Optional[int] = None):
        if employee_id is None:
            return
        query = self.db.query(Employee.id).filter(Employee.employee_id == employee_id)
        if exclude_id is not None:
            query = query.filter(Employee.id != exclude_id)
        if query.first():
            raise ConflictError(
                f"Employee ID '{employee_id}' is already in use",
                details={"employee_id": employee_id},
            )

    def _has_dependent_rows(self, employee_id: str) -> bool:
        for model in (EmployeeDocument, LeaveEvent, LeaveSummary):
            if self.db.query(model.id).filter(model.employee_id == employee_id).first():
                return True
        return False

    def _rekey_leave_rows(self, old_key: str, new_key: str):
        """Move leave history and counters to the new business key (same transaction)."""
        for model in (LeaveEvent, LeaveSummary):
            self.db.query(model).filter(model.employee_id == old_key).update(
                {model.employee_id: new_key}, synchronize_session=False
            )

    def _flush_employee(self, employee: Employee):
        try:
            with self.transaction():
                self.db.add(employee)
        except IntegrityError as e:
            if is_unique_violation(e):
                raise ConflictError("Employee ID is already in use") from e
            raise
        self.db.refresh(employee)

    def create(self, data: EmployeeCreate, profile_image_url: Optional[str] = None) -> Employee:
        self.ensure_business_id_free(data.employee_id)

        fields = data.model_dump(exclude={"password"})
        for leave_type in LEAVE_TYPES:
            if fields[leave_type] is None:
                fields[leave_type] = 0
        if profile_image_url:
            fields["profile_image"] = profile_image_url

        employee = Employee(**fields)
        if data.password:
            employee.password = get_password_hash(data.password)

        self._flush_employee(employee)
        self._logger.info(f"Created employee {employee.id} ({employee.employee_id})")
        return employee

    def update(self, id: int, data: EmployeeUpdate, profile_image_url: Optional[str] = None) -> Employee:
        """
        Replace the profile columns. Leave balances, the password and the
        profile image are only changed when supplied. A new business key is
        carried over to the employee's documents and leave records; clearing
        it while such records exist is rejected.
        """
        employee = self.get(id)
        old_key = employee.employee_id
        new_key = data.employee_id
        self.ensure_business_id_free(new_key, exclude_id=id)

        if old_key is not None and new_key is None and self._has_dependent_rows(old_key):
            raise ValidationError(
                "Employee ID cannot be cleared while documents or leave records reference it",
                details={"employee_id": old_key},
            )

        fields = data.model_dump(exclude={"password", "profile_image", *LEAVE_TYPES})
        for key, value in fields.items():
            setattr(employee, key, value)
        for leave_type in LEAVE_TYPES:
            value = getattr(data, leave_type)
            if value is not None:
                setattr(employee, leave_type, value)

        if profile_image_url:
            employee.profile_image = profile_image_url
        elif data.profile_image:
            employee.profile_image = data.profile_image

        if data.password:
            employee.password = get_password_hash(data.password)

        if old_key is not None and new_key is not None and new_key != old_key:
            self._rekey_leave_rows(old_key, new_key)
            self._logger.info(f"Employee {id} business key changed {old_key} -> {new_key}")

        self._flush_employee(employee)
        return employee

    def set_profile_image(self, employee_id: str, url: str) -> Employee:
        employee = self.get_by_business_id(employee_id)
        with self.transaction():
            employee.profile_image = url
        self.db.refresh(employee)
        return employee

    def delete(self, id: int) -> int:
        """Delete by primary key together with the document row. Returns rows removed."""
        employee = self.db.get(Employee, id)
        if not employee:
            return 0
        with self.transaction():
            self.db.delete(employee)
        self._logger.info(f"Deleted employee {id}")
        return 1
