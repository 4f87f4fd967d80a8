"""Upload validation: type and size checks before any processing."""

from flashforge_core.errors import FileTooLargeError, UnsupportedTypeError
from flashforge_core.schemas.uploads import FileMeta, SupportedMimeType

DEFAULT_MAX_UPLOAD_BYTES = 10_000_000

SUPPORTED_MIME_TYPES = frozenset(mime.value for mime in SupportedMimeType)


def validate_file(meta: FileMeta, max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES) -> None:
    """Reject uploads that are too large or of an unsupported type.

    The size limit is checked first so an oversized upload is always reported
    as too large, whatever its declared type.

    Args:
        meta: Declared type and size of the upload
        max_bytes: Inclusive size limit

    Raises:
        FileTooLargeError: If ``meta.size_bytes`` exceeds ``max_bytes``
        UnsupportedTypeError: If ``meta.mime_type`` is not supported
    """
    if meta.size_bytes > max_bytes:
        raise FileTooLargeError(meta.size_bytes, max_bytes)

    if meta.mime_type not in SUPPORTED_MIME_TYPES:
        raise UnsupportedTypeError(meta.mime_type)
