import logging
import os
import uuid

from fastapi import UploadFile

from ..errors import PayloadTooLargeError

logger = logging.getLogger(__name__)


def save_upload_file(
    upload_file: UploadFile, upload_dir: str, max_file_size: int
) -> str:
    """Save uploaded file under a random name and return that name"""
    file_size = 0
    chunk_size = 1024 * 1024  # 1MB

    # Create upload directory if it doesn't exist
    os.makedirs(upload_dir, exist_ok=True)

    # Generate unique filename, keep the extension for static serving
    file_extension = os.path.splitext(upload_file.filename or "")[1].lower()
    unique_filename = f"{uuid.uuid4().hex}{file_extension}"
    file_path = os.path.join(upload_dir, unique_filename)

    # Save file
    with open(file_path, "wb") as f:
        while chunk := upload_file.file.read(chunk_size):
            file_size += len(chunk)
            if file_size > max_file_size:
                f.close()
                os.remove(file_path)
                raise PayloadTooLargeError("File too large")
            f.write(chunk)

    logger.info(
        "Stored upload %r as %s (%d bytes)",
        upload_file.filename,
        unique_filename,
        file_size,
    )
    return unique_filename


def delete_file(upload_dir: str, filename: str):
    """Delete a stored upload, ignoring names that are already gone"""
    file_path = os.path.join(upload_dir, filename)
    if os.path.exists(file_path):
        os.remove(file_path)
