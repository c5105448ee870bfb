from typing import Optional
from pydantic import BaseModel


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class DeleteResponse(BaseModel):
    """Deletes are idempotent: `deleted` is 0 when the row was already gone."""
    success: bool = True
    deleted: int
    message: Optional[str] = None
