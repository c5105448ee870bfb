from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from employee_records.schemas.employee import EmployeeResponse


class EmployeeLoginRequest(BaseModel):
    employee_id: str
    password: str


class AdminLoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    employee: Optional[EmployeeResponse] = None


class AdminPasswordChange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    new_password: str = Field(
        min_length=1, validation_alias=AliasChoices("newPassword", "new_password")
    )
