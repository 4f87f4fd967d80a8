"""Upload schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SupportedMimeType(str, Enum):
    """MIME types accepted for upload."""

    TEXT = "text/plain"
    PDF = "application/pdf"
    DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class FileMeta(BaseModel):
    """What the validator needs to know about an upload."""

    mime_type: str = Field(..., description="Declared MIME type")
    size_bytes: int = Field(..., ge=0, description="Size of the content in bytes")
    name: str | None = Field(None, description="Original file name, if known")

    model_config = ConfigDict(frozen=True)


class UploadedFile(FileMeta):
    """An upload with its content read into memory."""

    data: bytes = Field(..., repr=False, description="Raw file content")
