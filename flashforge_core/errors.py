"""Exception hierarchy for the ingestion, synthesis and review pipeline.

Every error is recoverable: it aborts the stage that raised it and leaves any
previously loaded deck alone. Each class carries a stable ``kind`` string so
callers (and the ingest graph state) can branch without isinstance chains.
"""


class FlashForgeError(Exception):
    """Base class for all library errors."""

    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FlashForgeError):
    """An upload was rejected before any processing."""

    kind = "validation"


class UnsupportedTypeError(ValidationError):
    """The upload's MIME type is not one of the supported formats."""

    kind = "unsupported_type"

    def __init__(self, mime_type: str):
        super().__init__(
            f"Unsupported file type '{mime_type}'. "
            "Please upload a PDF, DOCX, or TXT file."
        )
        self.mime_type = mime_type


class FileTooLargeError(ValidationError):
    """The upload exceeds the configured size limit."""

    kind = "too_large"

    def __init__(self, size_bytes: int, max_bytes: int):
        super().__init__(
            f"File is too large ({size_bytes} bytes). "
            f"Maximum size is {max_bytes} bytes."
        )
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes


class ExtractionError(FlashForgeError):
    """Text could not be obtained from a validated upload."""

    kind = "extraction"


class DecodeFailedError(ExtractionError):
    """The byte stream is not parseable as its claimed format."""

    kind = "decode_failed"


class EmptyContentError(ExtractionError):
    """Decoding succeeded but produced no usable text."""

    kind = "empty_content"

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "Could not extract text from the file. "
            "Please try another file or paste your notes directly."
        )


class SynthesisError(FlashForgeError):
    """Flashcards could not be produced from the given text."""

    kind = "synthesis"


class EmptyInputError(SynthesisError):
    """The text handed to synthesis is empty after trimming."""

    kind = "empty_input"

    def __init__(self, message: str | None = None):
        super().__init__(
            message or "Please provide some study notes to generate flashcards."
        )


class GenerationFailedError(SynthesisError):
    """A configured external generation service timed out or failed."""

    kind = "generation_failed"


class NoCardsProducedError(SynthesisError):
    """A generator returned no cards for non-empty input."""

    kind = "no_cards_produced"

    def __init__(self, message: str | None = None):
        super().__init__(
            message
            or "No flashcards could be generated. Please try with different content."
        )


class SessionBusyError(FlashForgeError):
    """A session was asked to load new material while a load is in flight."""

    kind = "session_busy"

    def __init__(self, message: str | None = None):
        super().__init__(
            message or "Another document is still being processed. Please wait."
        )
