from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class DocType(str, Enum):
    OFFER_LETTER = "offer_letter"
    SALARY_SLIP = "salary_slip"


class DocumentUpsert(BaseModel):
    """Omitted (null) fields keep whatever URL is already stored."""
    model_config = ConfigDict(populate_by_name=True)

    offer_letter_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("offerLetterUrl", "offer_letter_url")
    )
    salary_slip_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("salarySlipUrl", "salary_slip_url")
    )


class DocumentEntry(BaseModel):
    doc_type: DocType
    file_path: str


class EmployeeDocumentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    employee_id: str
    offer_letter_url: Optional[str] = None
    salary_slip_url: Optional[str] = None
    updated_at: Optional[datetime] = None


class DocumentUploadResponse(BaseModel):
    success: bool = True
    doc_type: DocType
    file_path: str
    documents: EmployeeDocumentResponse
