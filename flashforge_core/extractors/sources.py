"""Byte sources: where upload content comes from.

The pipeline never touches the filesystem or a web framework's upload object
directly; it reads through a ``ByteSource`` so validation and extraction can
be exercised with in-memory bytes.
"""

import asyncio
import mimetypes
from abc import ABC, abstractmethod
from pathlib import Path

from flashforge_core.schemas.uploads import FileMeta, SupportedMimeType, UploadedFile

# mimetypes does not know .docx on every platform
_EXTENSION_TYPES = {
    ".txt": SupportedMimeType.TEXT.value,
    ".pdf": SupportedMimeType.PDF.value,
    ".docx": SupportedMimeType.DOCX.value,
}


def guess_mime_type(name: str) -> str:
    """Guess a MIME type from a file name, defaulting to octet-stream."""
    suffix = Path(name).suffix.lower()
    if suffix in _EXTENSION_TYPES:
        return _EXTENSION_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(name)
    return guessed or "application/octet-stream"


class ByteSource(ABC):
    """Abstract reader for one upload's metadata and content."""

    @property
    @abstractmethod
    def mime_type(self) -> str:
        pass

    @property
    @abstractmethod
    def size_bytes(self) -> int:
        pass

    @property
    def name(self) -> str | None:
        return None

    @abstractmethod
    async def read(self) -> bytes:
        """Return the full content."""
        pass

    def meta(self) -> FileMeta:
        """Describe the upload without reading it."""
        return FileMeta(
            mime_type=self.mime_type, size_bytes=self.size_bytes, name=self.name
        )


class BytesSource(ByteSource):
    """In-memory content, e.g. a request body already received."""

    def __init__(self, data: bytes, mime_type: str, name: str | None = None):
        self._data = data
        self._mime_type = mime_type
        self._name = name

    @property
    def mime_type(self) -> str:
        return self._mime_type

    @property
    def size_bytes(self) -> int:
        return len(self._data)

    @property
    def name(self) -> str | None:
        return self._name

    async def read(self) -> bytes:
        return self._data


class PathSource(ByteSource):
    """A file on disk; read in a worker thread."""

    def __init__(self, path: str | Path, mime_type: str | None = None):
        self.path = Path(path)
        self._mime_type = mime_type or guess_mime_type(self.path.name)

    @property
    def mime_type(self) -> str:
        return self._mime_type

    @property
    def size_bytes(self) -> int:
        return self.path.stat().st_size

    @property
    def name(self) -> str | None:
        return self.path.name

    async def read(self) -> bytes:
        return await asyncio.to_thread(self.path.read_bytes)


async def load_upload(source: ByteSource) -> UploadedFile:
    """Read a source into an ``UploadedFile``.

    The declared size is taken from the bytes actually read.
    """
    data = await source.read()
    return UploadedFile(
        mime_type=source.mime_type,
        size_bytes=len(data),
        name=source.name,
        data=data,
    )
