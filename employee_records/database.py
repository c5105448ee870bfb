from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from employee_records.core.config import settings

# Support both PostgreSQL and SQLite via centralized settings
DATABASE_URL = settings.database_url

if DATABASE_URL.startswith("postgres"):
    engine = create_engine(DATABASE_URL, pool_pre_ping=True)
else:
    # SQLite configuration for local development/testing
    engine = create_engine(
        DATABASE_URL, connect_args={"check_same_thread": False}
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    """
    Session Provider: Provides a database session per request.
    Transaction management is handled explicitly in the Service Layer.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db(bind=None):
    """
    Registers all domain models and creates any missing tables.
    Safe to run repeatedly; existing tables are left untouched.
    """
    from employee_records.models import (  # noqa: F401
        employee, admin, leave_event, leave_summary, event, employee_document
    )
    Base.metadata.create_all(bind=bind or engine)
