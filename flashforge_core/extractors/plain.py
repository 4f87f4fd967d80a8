"""Plain text extractor."""

from flashforge_core.errors import DecodeFailedError
from flashforge_core.extractors.base import BaseTextExtractor, ProgressTracker
from flashforge_core.schemas.uploads import SupportedMimeType


class PlainTextExtractor(BaseTextExtractor):
    """Strict UTF-8 decode; well-formed input round-trips byte for byte."""

    mime_type = SupportedMimeType.TEXT.value

    async def decode(self, data: bytes, tracker: ProgressTracker) -> str:
        try:
            # Plain "utf-8" keeps a leading BOM as U+FEFF, so re-encoding is lossless
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeFailedError(
                f"Text file is not valid UTF-8 (byte {e.start}): {e.reason}"
            ) from e
