"""Base text extractor interface."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar

from flashforge_core.errors import DecodeFailedError, EmptyContentError
from flashforge_core.schemas.uploads import UploadedFile
from flashforge_core.utils.logging import get_logger
from flashforge_core.utils.text import is_blank

logger = get_logger(__name__)

ProgressReporter = Callable[[int], None]

DEFAULT_EXTRACTION_TIMEOUT = 60.0


class ProgressTracker:
    """Forward progress percentages to a callback, never going backwards."""

    def __init__(self, callback: ProgressReporter | None = None):
        self._callback = callback
        self.value: int | None = None

    def report(self, value: int) -> None:
        value = max(0, min(100, int(value)))
        if self.value is not None and value <= self.value:
            return
        self.value = value
        if self._callback is not None:
            self._callback(value)


class BaseTextExtractor(ABC):
    """Abstract base class for format-specific text extraction.

    Extractors hold no per-call state, so one instance can serve concurrent
    uploads.
    """

    mime_type: ClassVar[str]

    async def extract(
        self,
        file: UploadedFile,
        progress: ProgressReporter | None = None,
    ) -> str:
        """Convert the uploaded bytes into plain text.

        Args:
            file: Upload with its content
            progress: Optional callback receiving percentages (0-100)

        Returns:
            Extracted text

        Raises:
            DecodeFailedError: If the bytes are not valid for the format
            EmptyContentError: If decoding yields only whitespace
        """
        tracker = ProgressTracker(progress)
        tracker.report(0)

        text = await self.decode(file.data, tracker)

        if is_blank(text):
            logger.warning(f"No text extracted from {file.name or 'upload'}")
            raise EmptyContentError()

        tracker.report(100)
        logger.info(
            f"Extracted {len(text)} characters from {file.name or 'upload'} "
            f"({self.mime_type})"
        )
        return text

    @abstractmethod
    async def decode(self, data: bytes, tracker: ProgressTracker) -> str:
        """Decode raw bytes into text.

        Args:
            data: Raw file bytes
            tracker: Progress sink for long decodes

        Returns:
            Decoded text, possibly empty
        """
        pass


class ThreadedExtractor(BaseTextExtractor):
    """Extractor whose blocking decode runs in a worker thread.

    The awaiting task can be cancelled, and the decode is abandoned with
    ``DecodeFailedError`` once ``timeout`` seconds pass.
    """

    def __init__(self, timeout: float = DEFAULT_EXTRACTION_TIMEOUT):
        self.timeout = timeout

    async def decode(self, data: bytes, tracker: ProgressTracker) -> str:
        loop = asyncio.get_running_loop()

        def report_from_thread(value: int) -> None:
            loop.call_soon_threadsafe(tracker.report, value)

        try:
            text = await asyncio.wait_for(
                asyncio.to_thread(self.decode_sync, data, report_from_thread),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"{self.mime_type} decode timed out after {self.timeout}s")
            raise DecodeFailedError(
                f"Timed out after {self.timeout:g}s while reading the document"
            ) from e

        # Let queued thread-side progress updates land before returning
        await asyncio.sleep(0)
        return text

    @abstractmethod
    def decode_sync(self, data: bytes, report: ProgressReporter) -> str:
        """Blocking decode, executed off the event loop.

        Args:
            data: Raw file bytes
            report: Thread-safe progress callback

        Returns:
            Decoded text
        """
        pass
