import pytest
import os
import tempfile
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="employee-records-uploads-")
os.environ["LOGIN_RATE_LIMIT"] = "1000/minute"

from employee_records.database import Base, get_db, init_db
from employee_records.main import app
from employee_records.services.storage import LocalFileStorage, get_storage
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# pysqlite defers BEGIN on its own; emit it from SQLAlchemy so service commits
# only release savepoints inside the per-test transaction.
@event.listens_for(engine, "connect")
def _disable_pysqlite_transactions(dbapi_connection, connection_record):
    dbapi_connection.isolation_level = None

@event.listens_for(engine, "begin")
def _emit_begin(conn):
    conn.exec_driver_sql("BEGIN")

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    init_db(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """
    Session bound to an outer transaction that is rolled back after each test.
    Service-level commits and rollbacks only touch savepoints inside it.
    """
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection, join_transaction_mode="create_savepoint")

    yield session

    session.close()
    transaction.rollback()
    connection.close()

@pytest.fixture(scope="function")
def storage(tmp_path):
    return LocalFileStorage(root=str(tmp_path), url_prefix="/uploads", max_bytes=1024)

@pytest.fixture(scope="function")
def client(db_session, storage):
    """TestClient wired to the test session and a per-test storage directory."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture(scope="function")
def admin_user(db_session):
    """The seeded admin account with a known password."""
    from employee_records.core.config import settings
    from employee_records.services.auth import AuthService

    return AuthService(db_session).ensure_admin(settings.admin_username, "AdminPassword123!", reset=True)

@pytest.fixture(scope="function")
def make_employee(client):
    """Create employees through the API and return the JSON body."""
    def _make_employee(**overrides):
        payload = {
            "name": "Asha Verma",
            "employee_id": "E100",
            "designation": "Engineer",
            "dob": "1994-03-12",
            "joining_date": "2021-07-01",
            "payroll_name": "ASHA VERMA",
            "team": "Platform",
            "grade": "G5",
            "password": "s3cret",
        }
        payload.update(overrides)
        response = client.post("/employees", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _make_employee
