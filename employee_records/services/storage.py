"""
File storage for uploaded images and documents.

Handlers only ever persist the URL returned by `FileStorage.save`; raw bytes
never reach the relational store.
"""
import logging
import os
import re
import shutil
import tempfile
import uuid
from typing import Optional

from fastapi import UploadFile

from employee_records.core.config import settings
from employee_records.core.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def safe_folder(folder: str) -> str:
    """Relative folder path with every segment reduced to [A-Za-z0-9_-]."""
    parts = [re.sub(r"[^A-Za-z0-9_-]", "_", p) for p in folder.split("/") if p not in ("", ".", "..")]
    return "/".join(parts) or "misc"


class FileStorage:
    """Interface for storage backends."""

    def save(self, upload: UploadFile, folder: str) -> str:
        """Persist `upload` under `folder` and return a URL the client can fetch."""
        raise NotImplementedError

    def delete(self, url: str) -> None:
        """Remove a file previously returned by `save`. Missing files are ignored."""
        raise NotImplementedError


class LocalFileStorage(FileStorage):
    def __init__(self, root: str, url_prefix: str = "/uploads", max_bytes: Optional[int] = None):
        self.root = root
        self.url_prefix = url_prefix.rstrip("/")
        self.max_bytes = max_bytes

    def _stored_name(self, filename: Optional[str]) -> str:
        ext = re.sub(r"[^a-z0-9.]", "", os.path.splitext(filename or "")[1].lower())[:16]
        return f"{uuid.uuid4().hex}{ext}"

    def save(self, upload: UploadFile, folder: str) -> str:
        folder = safe_folder(folder)
        target_dir = os.path.join(self.root, folder)
        os.makedirs(target_dir, exist_ok=True)
        stored_name = self._stored_name(upload.filename)
        target_path = os.path.join(target_dir, stored_name)

        # Stream into a temp file in the same directory, then rename into place.
        # The temp file is removed on every path, including failed moves.
        fd, tmp_path = tempfile.mkstemp(dir=target_dir, prefix=".upload-")
        try:
            size = 0
            with os.fdopen(fd, "wb") as out:
                upload.file.seek(0)
                while True:
                    chunk = upload.file.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if self.max_bytes is not None and size > self.max_bytes:
                        raise ValidationError(
                            f"File exceeds the {self.max_bytes} byte upload limit"
                        )
                    out.write(chunk)
            if size == 0:
                raise ValidationError("Uploaded file is empty")
            shutil.move(tmp_path, target_path)
        except (ValidationError, StorageError):
            raise
        except OSError as e:
            logger.error(f"Failed to store upload {upload.filename!r}: {e}", exc_info=True)
            raise StorageError() from e
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

        logger.info(f"Stored {upload.filename!r} ({size} bytes) as {folder}/{stored_name}")
        return f"{self.url_prefix}/{folder}/{stored_name}"

    def delete(self, url: str) -> None:
        if not url.startswith(self.url_prefix + "/"):
            return
        relative = url[len(self.url_prefix) + 1:]
        folder, _, name = relative.rpartition("/")
        path = os.path.join(self.root, safe_folder(folder), os.path.basename(name))
        try:
            os.remove(path)
        except FileNotFoundError:
            return
        except OSError as e:
            logger.warning(f"Could not remove stored file {url!r}: {e}")
            return
        logger.info(f"Removed stored file {url}")


_default_storage = LocalFileStorage(
    root=settings.upload_dir,
    url_prefix=settings.uploads_url_prefix,
    max_bytes=settings.max_upload_bytes,
)


def get_storage() -> FileStorage:
    """FastAPI dependency returning the configured storage backend."""
    return _default_storage
