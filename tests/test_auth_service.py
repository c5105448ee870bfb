import pytest
from employee_records.core.security import get_password_hash, verify_password
from employee_records.core.exceptions import NotFoundError
from employee_records.models.admin import Admin
from employee_records.services.auth import AuthService

def test_password_hashing():
    """Test that password hashing and verification works correctly."""
    password = "MySecurePassword123!"
    hashed = get_password_hash(password)
    assert hashed != password
    assert verify_password(password, hashed)
    assert not verify_password("WrongPassword", hashed)

def test_hashes_are_salted():
    assert get_password_hash("same") != get_password_hash("same")

def test_verify_rejects_missing_and_legacy_values():
    assert not verify_password("p", None)
    assert not verify_password("", get_password_hash("p"))
    # rows written before hashing held the plaintext itself
    assert not verify_password("p", "p")

def test_ensure_admin_is_idempotent(db_session):
    service = AuthService(db_session)
    first = service.ensure_admin("root", "one")
    second = service.ensure_admin("root", "two")
    assert first.id == second.id
    assert db_session.query(Admin).filter(Admin.username == "root").count() == 1
    # without reset the original password stands
    assert service.authenticate_admin("root", "one") is not None
    assert service.authenticate_admin("root", "two") is None

def test_ensure_admin_reset(db_session):
    service = AuthService(db_session)
    service.ensure_admin("root", "one")
    service.ensure_admin("root", "two", reset=True)
    assert service.authenticate_admin("root", "two") is not None

def test_change_password_for_unknown_admin(db_session):
    with pytest.raises(NotFoundError):
        AuthService(db_session).change_admin_password("x", username="ghost")
