from typing import List, Optional

from employee_records.core.exceptions import NotFoundError
from employee_records.models.employee import Employee
from employee_records.models.employee_document import EmployeeDocument
from employee_records.schemas.document import DocType, DocumentEntry, DocumentUpsert
from employee_records.services.base import BaseService

# doc_type -> column on employee_documents
DOC_COLUMNS = {
    DocType.OFFER_LETTER: "offer_letter_url",
    DocType.SALARY_SLIP: "salary_slip_url",
}


class DocumentService(BaseService):
    """One row of document URLs per employee, written by upsert only."""

    def _require_employee(self, employee_id: str):
        exists = self.db.query(Employee.id).filter(Employee.employee_id == employee_id).first()
        if not exists:
            raise NotFoundError("Employee not found")

    def _find(self, employee_id: str) -> Optional[EmployeeDocument]:
        return (
            self.db.query(EmployeeDocument)
            .filter(EmployeeDocument.employee_id == employee_id)
            .first()
        )

    def save_documents(self, employee_id: str, data: DocumentUpsert) -> EmployeeDocument:
        """Insert or update; a null field keeps the stored URL."""
        self._require_employee(employee_id)
        with self.transaction():
            row = self._find(employee_id)
            if not row:
                row = EmployeeDocument(employee_id=employee_id)
                self.db.add(row)
            if data.offer_letter_url is not None:
                row.offer_letter_url = data.offer_letter_url
            if data.salary_slip_url is not None:
                row.salary_slip_url = data.salary_slip_url
        self.db.refresh(row)
        return row

    def save_document_url(self, employee_id: str, doc_type: DocType, url: str) -> EmployeeDocument:
        return self.save_documents(
            employee_id, DocumentUpsert(**{DOC_COLUMNS[doc_type]: url})
        )

    def get_documents(self, employee_id: str) -> List[DocumentEntry]:
        row = self._find(employee_id)
        if not row:
            return []
        entries = []
        for doc_type, column in DOC_COLUMNS.items():
            url = getattr(row, column)
            if url:
                entries.append(DocumentEntry(doc_type=doc_type, file_path=url))
        return entries
