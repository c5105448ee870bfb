from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from employee_records.core.config import settings
from employee_records.core.limiter import limiter
from employee_records.core.schemas import MessageResponse
from employee_records.database import get_db
from employee_records.schemas.auth import (
    AdminLoginRequest,
    AdminPasswordChange,
    EmployeeLoginRequest,
    LoginResponse,
)
from employee_records.schemas.employee import EmployeeResponse
from employee_records.services.auth import AuthService

router = APIRouter(tags=["auth"])

# Failed logins answer 200 + success:false so the client handles a single shape.

@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.login_rate_limit)
def login(request: Request, login_data: EmployeeLoginRequest, db: Session = Depends(get_db)):
    employee = AuthService(db).authenticate_employee(login_data.employee_id, login_data.password)
    if not employee:
        return LoginResponse(success=False, message="Invalid ID or Password")
    return LoginResponse(
        success=True,
        message="Login successful",
        employee=EmployeeResponse.model_validate(employee),
    )


@router.post("/admin-login", response_model=LoginResponse)
@limiter.limit(settings.login_rate_limit)
def admin_login(request: Request, login_data: AdminLoginRequest, db: Session = Depends(get_db)):
    admin = AuthService(db).authenticate_admin(login_data.username, login_data.password)
    if not admin:
        return LoginResponse(success=False, message="Invalid credentials")
    return LoginResponse(success=True, message="Admin login successful")


@router.put("/admin/password", response_model=MessageResponse)
def change_admin_password(data: AdminPasswordChange, db: Session = Depends(get_db)):
    AuthService(db).change_admin_password(data.new_password)
    return MessageResponse(message="Password updated successfully")
