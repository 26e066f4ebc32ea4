import os
import uuid
from typing import Optional

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename
from flask import current_app

from hotel_cms.domain.exceptions import UploadError

UPLOAD_PREFIX = "uploads/"


def has_upload(file: Optional[FileStorage]) -> bool:
    return file is not None and bool(file.filename)


def allowed_file(filename):
    allowed = current_app.config["ALLOWED_IMAGE_EXTENSIONS"]
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in allowed


def _file_size(file: FileStorage) -> int:
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def media_path(relative_path: str) -> str:
    return os.path.join(current_app.config["MEDIA_ROOT"], relative_path)


def save_upload(file: FileStorage, subdir: str = "content") -> str:
    """
    Validate and store an uploaded image.

    Returns the path relative to MEDIA_ROOT, e.g. "uploads/content/<uuid>.jpg".
    Raises UploadError for a missing file, a disallowed extension, an
    oversized file or a failed write.
    """
    if not has_upload(file):
        raise UploadError("No file was uploaded")

    filename = secure_filename(file.filename)
    if not allowed_file(filename):
        raise UploadError("File type not allowed. Use JPG, PNG or WEBP.")

    max_size = current_app.config["MAX_UPLOAD_SIZE"]
    if _file_size(file) > max_size:
        raise UploadError(f"File is too large (max {max_size // (1024 * 1024)} MB).")

    ext = filename.rsplit('.', 1)[1].lower()
    relative_path = f"{UPLOAD_PREFIX}{subdir}/{uuid.uuid4().hex}.{ext}"
    file_path = media_path(relative_path)

    try:
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        file.save(file_path)
    except OSError as e:
        current_app.logger.error(f"Failed to write upload {file_path}: {e}")
        raise UploadError("The file could not be saved.") from e

    current_app.logger.info(f"Stored upload {relative_path}")
    return relative_path


def delete_file(relative_path):
    """
    Deletes a stored upload given its relative path. Best-effort: a file
    that is already gone is logged and reported as not deleted.
    """
    if not relative_path:
        return False

    # Only files we stored ourselves, never bundled site assets
    if not relative_path.startswith(UPLOAD_PREFIX):
        return False

    file_path = media_path(relative_path)

    if not os.path.exists(file_path):
        current_app.logger.warning(f"File already missing, nothing to delete: {file_path}")
        return False

    try:
        os.remove(file_path)
        return True
    except OSError as e:
        current_app.logger.error(f"Failed to delete file {file_path}: {e}")
        return False
