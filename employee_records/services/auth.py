import logging
from typing import Optional

from employee_records.core.config import settings
from employee_records.core.exceptions import NotFoundError
from employee_records.core.security import get_password_hash, verify_password
from employee_records.models.admin import Admin
from employee_records.models.employee import Employee
from employee_records.services.base import BaseService

logger = logging.getLogger(__name__)


class AuthService(BaseService):
    """
    Stateless credential checks. Failures never say whether the account or
    the password was wrong.
    """

    def authenticate_employee(self, employee_id: str, password: str) -> Optional[Employee]:
        employee = self.db.query(Employee).filter(Employee.employee_id == employee_id).first()
        if not employee or not verify_password(password, employee.password):
            logger.info("Failed employee login", extra={"employee_id": employee_id})
            return None
        return employee

    def authenticate_admin(self, username: str, password: str) -> Optional[Admin]:
        admin = self.db.query(Admin).filter(Admin.username == username).first()
        if not admin or not verify_password(password, admin.password):
            logger.info("Failed admin login", extra={"username": username})
            return None
        return admin

    def change_admin_password(self, new_password: str, username: Optional[str] = None) -> Admin:
        username = username or settings.admin_username
        admin = self.db.query(Admin).filter(Admin.username == username).first()
        if not admin:
            raise NotFoundError("Admin account not found")
        with self.transaction():
            admin.password = get_password_hash(new_password)
        logger.info(f"Password changed for admin '{username}'")
        return admin

    def ensure_admin(self, username: str, password: str, reset: bool = False) -> Admin:
        """Create the admin account if missing; with `reset`, overwrite its password."""
        admin = self.db.query(Admin).filter(Admin.username == username).first()
        with self.transaction():
            if not admin:
                admin = Admin(username=username, password=get_password_hash(password))
                self.db.add(admin)
                logger.info(f"✓ Created admin account '{username}'")
            elif reset:
                admin.password = get_password_hash(password)
                logger.info(f"Admin account '{username}' password reset")
        return admin
