import logging
from employee_records.core.config import settings
from employee_records.database import SessionLocal
from employee_records.services.auth import AuthService

logger = logging.getLogger(__name__)

DEFAULT_DEV_ADMIN_PASSWORD = "admin"

def init_system_data(session_factory=SessionLocal):
    """
    Seed the bootstrap admin account if it does not exist yet.
    An existing account (and its password) is never touched here.
    """
    db = session_factory()
    try:
        AuthService(db).ensure_admin(
            settings.admin_username,
            settings.admin_password or DEFAULT_DEV_ADMIN_PASSWORD,
        )
        logger.info(f"System initialization check: admin '{settings.admin_username}' present.")
    finally:
        db.close()
