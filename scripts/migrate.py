"""
Create any missing tables and seed the admin account, then exit.
Exits with status 1 if the database cannot be migrated.
"""
import sys
import os
import logging

# Ensure we can import project modules when run from a checkout
sys.path.append(os.getcwd())

from employee_records.core.config import settings
from employee_records.core.init_system import init_system_data
from employee_records.database import init_db

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

def migrate() -> int:
    try:
        init_db()
        init_system_data()
    except Exception as e:
        logger.error(f"Migration error: {e}", exc_info=True)
        return 1
    logger.info(f"✅ Migration complete ({settings.database_url.split('@')[-1]})")
    return 0

if __name__ == "__main__":
    sys.exit(migrate())
