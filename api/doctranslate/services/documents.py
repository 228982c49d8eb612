import base64
import logging
from dataclasses import dataclass
from pathlib import PurePath

from doctranslate.config import settings
from doctranslate.schemas.translate import Attachment
from doctranslate.services.errors import ReadFailure
from doctranslate.services.prompt_builder import DOCX_PLACEHOLDER, PDF_PLACEHOLDER

logger = logging.getLogger("doctranslate")

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Documents sent to the model as attachments, keyed by extension
ATTACHMENT_MEDIA_TYPES = {
    "pdf": PDF_MEDIA_TYPE,
    "docx": DOCX_MEDIA_TYPE,
}

PLACEHOLDERS = {
    PDF_MEDIA_TYPE: PDF_PLACEHOLDER,
    DOCX_MEDIA_TYPE: DOCX_PLACEHOLDER,
}

SUPPORTED_EXTENSIONS = ("txt", *ATTACHMENT_MEDIA_TYPES)


@dataclass
class DocumentContent:
    raw_text: str
    attachment: Attachment | None = None


def file_extension(filename: str) -> str:
    return PurePath(filename or "").suffix.lstrip(".").lower()


def media_type_for(filename: str) -> str | None:
    """Attachment media type for a filename, None for plain text or unknown types."""
    return ATTACHMENT_MEDIA_TYPES.get(file_extension(filename))


def format_limit(limit: int) -> str:
    if limit >= 1024 * 1024:
        return f"{limit / (1024 * 1024):g} MB"
    return f"{limit} bytes"


def check_size(size: int) -> None:
    """Raise ReadFailure when an upload of `size` bytes is over the limit."""
    if size > settings.upload_max_bytes:
        raise ReadFailure(
            f"File exceeds {format_limit(settings.upload_max_bytes)} limit"
        )


def read_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ReadFailure(f"Error reading the file: {e}")


def read_document(filename: str, data: bytes) -> DocumentContent:
    """Turn an uploaded file into prompt text and/or a base64 attachment."""
    ext = file_extension(filename)
    if ext not in SUPPORTED_EXTENSIONS:
        raise ReadFailure("Please upload a TXT, PDF or DOCX file")

    if not data:
        raise ReadFailure("The uploaded file is empty")
    check_size(len(data))

    media_type = media_type_for(filename)
    if media_type is None:
        return DocumentContent(raw_text=read_text(data))

    logger.info("Attaching %s as %s (%d bytes)", filename, media_type, len(data))
    return DocumentContent(
        raw_text=PLACEHOLDERS[media_type],
        attachment=Attachment(
            media_type=media_type,
            data=base64.b64encode(data).decode("ascii"),
        ),
    )
