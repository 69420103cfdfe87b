import logging
import uuid
from pathlib import Path

import aiofiles
from fastapi import HTTPException, UploadFile

from core import config

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPE = "application/pdf"
PDF_MAGIC = b"%PDF"


# ---------------- validate the upload ----------------
async def read_pdf(file: UploadFile) -> bytes:
    """Reads the whole upload and makes sure it is a PDF within the size limit."""
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No document uploaded")
    if file.content_type != ALLOWED_CONTENT_TYPE:
        raise HTTPException(status_code=400, detail="Only PDF files are allowed")

    content = await file.read(config.MAX_UPLOAD_BYTES + 1)
    if len(content) > config.MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=400, detail="File is too large")
    if not content.startswith(PDF_MAGIC):
        raise HTTPException(status_code=400, detail="Only PDF files are allowed")
    return content


# ---------------- store it under the upload dir ----------------
async def save_document(file: UploadFile, content: bytes) -> Path:
    """Writes the bytes under UPLOAD_DIR and returns the stored path."""
    upload_dir = Path(config.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)

    original = Path(file.filename).name.replace(" ", "_")
    file_path = upload_dir / f"{uuid.uuid4().hex}_{original}"
    async with aiofiles.open(file_path, "wb") as out_file:
        await out_file.write(content)
    logger.info("Stored document %s (%d bytes)", file_path, len(content))
    return file_path


def remove_document(path: str):
    file_path = Path(path)
    if file_path.exists():
        file_path.unlink()
        logger.info("Removed document %s", file_path)
