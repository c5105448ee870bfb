from datetime import date, datetime
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class EmployeeFields(BaseModel):
    """
    Mutable employee columns as accepted from JSON or multipart form bodies.
    HTML forms post empty inputs as "", which is stored as null.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str
    employee_id: Optional[str] = None
    designation: Optional[str] = None
    dob: Optional[date] = None
    joining_date: Optional[date] = None
    payroll_name: Optional[str] = None
    team: Optional[str] = None
    grade: Optional[str] = None
    profile_image: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("profile_image", "profileImage")
    )
    password: Optional[str] = None
    pl: Optional[int] = None
    cl: Optional[int] = None
    sl: Optional[int] = None
    el: Optional[int] = None

    @model_validator(mode="before")
    @classmethod
    def blank_to_none(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                k: (None if isinstance(v, str) and not v.strip() else v)
                for k, v in data.items()
            }
        return data


class EmployeeCreate(EmployeeFields):
    pass


class EmployeeUpdate(EmployeeFields):
    pass


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    employee_id: Optional[str] = None
    name: str
    designation: Optional[str] = None
    dob: Optional[date] = None
    joining_date: Optional[date] = None
    payroll_name: Optional[str] = None
    team: Optional[str] = None
    grade: Optional[str] = None
    profile_image: Optional[str] = None
    pl: int = 0
    cl: int = 0
    sl: int = 0
    el: int = 0
    created_at: Optional[datetime] = None


class ProfileImageResponse(BaseModel):
    success: bool = True
    profile_image: str
    employee: EmployeeResponse
