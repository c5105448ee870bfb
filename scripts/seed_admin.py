"""
Create the admin account, or reset its password if it already exists.

    python scripts/seed_admin.py [username] [password]

Defaults come from ADMIN_USERNAME / ADMIN_PASSWORD.
"""
import sys
import os
import logging

sys.path.append(os.getcwd())

from employee_records.core.config import settings
from employee_records.database import SessionLocal, init_db
from employee_records.services.auth import AuthService

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

def seed(username: str, password: str):
    init_db()
    db = SessionLocal()
    try:
        AuthService(db).ensure_admin(username, password, reset=True)
        logger.info(f"Admin '{username}' is ready.")
    finally:
        db.close()

if __name__ == "__main__":
    username = sys.argv[1] if len(sys.argv) > 1 else settings.admin_username
    password = sys.argv[2] if len(sys.argv) > 2 else settings.admin_password
    if not password:
        logger.error("No password given (pass one or set ADMIN_PASSWORD)")
        sys.exit(1)
    seed(username, password)
