import io
import os

import pytest
from fastapi import UploadFile

from employee_records.core.exceptions import ValidationError
from employee_records.services.storage import LocalFileStorage, safe_folder


def _upload(content: bytes, filename: str = "doc.pdf") -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=filename)


def test_save_writes_file_and_returns_url(tmp_path):
    storage = LocalFileStorage(root=str(tmp_path), url_prefix="/uploads/")
    url = storage.save(_upload(b"hello"), "documents/E1")

    assert url.startswith("/uploads/documents/E1/")
    assert url.endswith(".pdf")
    stored = tmp_path / "documents" / "E1" / os.path.basename(url)
    assert stored.read_bytes() == b"hello"


def test_no_temp_files_left_behind(tmp_path):
    storage = LocalFileStorage(root=str(tmp_path), max_bytes=3)
    storage.save(_upload(b"ok"), "x")
    with pytest.raises(ValidationError):
        storage.save(_upload(b"too long"), "x")
    with pytest.raises(ValidationError):
        storage.save(_upload(b""), "x")

    leftovers = [name for name in os.listdir(tmp_path / "x") if name.startswith(".upload-")]
    assert leftovers == []
    assert len(os.listdir(tmp_path / "x")) == 1


@pytest.mark.parametrize("folder,expected", [
    ("documents/E1", "documents/E1"),
    ("../../etc", "etc"),
    ("documents/E 1/..", "documents/E_1"),
    ("", "misc"),
])
def test_safe_folder(folder, expected):
    assert safe_folder(folder) == expected


def test_delete_removes_saved_file(tmp_path):
    storage = LocalFileStorage(root=str(tmp_path), url_prefix="/uploads")
    url = storage.save(_upload(b"hello", "face.png"), "profile-images")
    storage.delete(url)
    assert os.listdir(tmp_path / "profile-images") == []

    # already gone, or not ours
    storage.delete(url)
    storage.delete("https://elsewhere.example/face.png")
