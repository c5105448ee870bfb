import logging
from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session
from starlette.datastructures import UploadFile as StarletteUploadFile

from employee_records.core.exceptions import ValidationError
from employee_records.core.schemas import DeleteResponse
from employee_records.database import get_db
from employee_records.schemas.employee import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    ProfileImageResponse,
)
from employee_records.services.employee_service import EmployeeService
from employee_records.services.storage import FileStorage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["employees"])

# Multipart field names the client uses for the profile picture
IMAGE_FIELDS = ("profileImage", "profile_image", "image", "file")
PROFILE_IMAGE_FOLDER = "profile-images"


async def _read_payload(request: Request) -> Tuple[dict, Optional[StarletteUploadFile]]:
    """Split a JSON or multipart body into plain fields and an optional image upload."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(("multipart/form-data", "application/x-www-form-urlencoded")):
        form = await request.form()
        fields, image = {}, None
        for key, value in form.multi_items():
            if isinstance(value, StarletteUploadFile):
                if key in IMAGE_FIELDS and value.filename:
                    image = value
            else:
                fields[key] = value
        return fields, image

    try:
        body = await request.json()
    except ValueError:
        raise ValidationError("Request body must be JSON or multipart form data")
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body, None


def _validate(model: type, fields: dict) -> BaseModel:
    try:
        return model.model_validate(fields)
    except PydanticValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in e.errors(include_url=False)]
        )


async def _store_then_write(storage: FileStorage, image: Optional[StarletteUploadFile], write, *args):
    """
    Store the optional image, then run the database write with its URL.
    The stored file is removed again if the write fails.
    """
    image_url = None
    if image is not None:
        image_url = await run_in_threadpool(storage.save, image, PROFILE_IMAGE_FOLDER)
    try:
        return await run_in_threadpool(write, *args, image_url)
    except Exception:
        if image_url:
            await run_in_threadpool(storage.delete, image_url)
        raise


@router.get("/employees", response_model=List[EmployeeResponse])
def list_employees(db: Session = Depends(get_db)):
    return EmployeeService(db).list()


@router.get("/employees/{id}", response_model=EmployeeResponse)
def get_employee(id: int, db: Session = Depends(get_db)):
    return EmployeeService(db).get(id)


@router.get("/api/employee/{employee_id}", response_model=EmployeeResponse)
def get_employee_by_business_id(employee_id: str, db: Session = Depends(get_db)):
    return EmployeeService(db).get_by_business_id(employee_id)


@router.post("/employees", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    request: Request,
    db: Session = Depends(get_db),
    storage: FileStorage = Depends(get_storage),
):
    """
    Create an employee from a JSON body, or from multipart form fields with an
    optional `profileImage` file.
    """
    fields, image = await _read_payload(request)
    data = _validate(EmployeeCreate, fields)
    service = EmployeeService(db)

    # 409 before anything is written to storage
    await run_in_threadpool(service.ensure_business_id_free, data.employee_id)

    return await _store_then_write(storage, image, service.create, data)


@router.put("/employees/{id}", response_model=EmployeeResponse)
async def update_employee(
    id: int,
    request: Request,
    db: Session = Depends(get_db),
    storage: FileStorage = Depends(get_storage),
):
    """
    Replace the profile fields. Without a new image upload the stored profile
    image is kept, as are leave balances the body leaves out.
    """
    fields, image = await _read_payload(request)
    data = _validate(EmployeeUpdate, fields)
    service = EmployeeService(db)

    # 404 and 409 before anything is written to storage
    await run_in_threadpool(service.get, id)
    await run_in_threadpool(service.ensure_business_id_free, data.employee_id, id)

    return await _store_then_write(storage, image, service.update, id, data)


@router.delete("/employees/{id}", response_model=DeleteResponse)
def delete_employee(id: int, db: Session = Depends(get_db)):
    deleted = EmployeeService(db).delete(id)
    message = "Employee deleted" if deleted else "Employee already absent"
    return DeleteResponse(deleted=deleted, message=message)


@router.post("/api/upload-profile-image/{employee_id}", response_model=ProfileImageResponse)
def upload_profile_image(
    employee_id: str,
    file: Optional[UploadFile] = File(None),
    profileImage: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    storage: FileStorage = Depends(get_storage),
):
    upload = file or profileImage
    if upload is None:
        raise ValidationError("No image uploaded")

    service = EmployeeService(db)
    service.get_by_business_id(employee_id)

    url = storage.save(upload, PROFILE_IMAGE_FOLDER)
    employee = service.set_profile_image(employee_id, url)
    return ProfileImageResponse(profile_image=url, employee=EmployeeResponse.model_validate(employee))
