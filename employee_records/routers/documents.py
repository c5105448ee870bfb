import logging
from typing import List

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.orm import Session

from employee_records.core.exceptions import ValidationError
from employee_records.database import get_db
from employee_records.schemas.document import (
    DocType,
    DocumentEntry,
    DocumentUploadResponse,
    DocumentUpsert,
    EmployeeDocumentResponse,
)
from employee_records.services.document_service import DocumentService
from employee_records.services.employee_service import EmployeeService
from employee_records.services.storage import FileStorage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["documents"])


@router.get("/{employee_id}", response_model=List[DocumentEntry])
def get_documents(employee_id: str, db: Session = Depends(get_db)):
    """One `{doc_type, file_path}` entry per stored URL; empty when nothing is stored."""
    return DocumentService(db).get_documents(employee_id)


@router.post("/{employee_id}", response_model=EmployeeDocumentResponse)
def save_documents(employee_id: str, data: DocumentUpsert, db: Session = Depends(get_db)):
    return DocumentService(db).save_documents(employee_id, data)


@router.post("/upload/{employee_id}", response_model=DocumentUploadResponse)
def upload_document(
    employee_id: str,
    file: UploadFile = File(...),
    doc_type: str = Form(...),
    db: Session = Depends(get_db),
    storage: FileStorage = Depends(get_storage),
):
    """Store the file, then point the employee's `doc_type` column at it."""
    try:
        kind = DocType(doc_type.strip().lower())
    except ValueError:
        raise ValidationError(
            f"Unknown doc_type '{doc_type}'",
            details={"allowed": [t.value for t in DocType]},
        )

    # Reject unknown employees before writing anything to storage
    EmployeeService(db).get_by_business_id(employee_id)

    url = storage.save(file, f"documents/{employee_id}")
    row = DocumentService(db).save_document_url(employee_id, kind, url)
    logger.info(f"Uploaded {kind.value} for {employee_id}: {file.filename}")
    return DocumentUploadResponse(
        doc_type=kind,
        file_path=url,
        documents=EmployeeDocumentResponse.model_validate(row),
    )
