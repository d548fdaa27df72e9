"""Error taxonomy shared by every pipeline stage.

Each error carries a ``kind`` (the external name reported to callers) and the
``stage`` it was raised in. Messages must be safe to show to the caller: no
filesystem paths, no stack detail.
"""

from typing import ClassVar


class IngestionError(Exception):
    """Base exception for all pipeline errors."""

    kind: ClassVar[str] = "IngestionError"
    default_stage: ClassVar[str] = "pipeline"

    def __init__(self, message: str, *, stage: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.stage = stage or self.default_stage


class ValidationError(IngestionError):
    """Bad or missing input, or an ownership mismatch. Never retried."""

    kind = "ValidationError"
    default_stage = "validation"


class AcquisitionError(IngestionError):
    """Content could not be obtained (all URL strategies failed, storage read failed)."""

    kind = "AcquisitionError"
    default_stage = "acquisition"


class ExtractionError(IngestionError):
    """A format-specific extraction library failed or produced no text."""

    kind = "ExtractionError"
    default_stage = "extraction"


class UnsupportedFormatError(IngestionError):
    """The declared file extension is not one the extractor handles."""

    kind = "UnsupportedFormatError"
    default_stage = "extraction"


class InsufficientContentError(IngestionError):
    """Extracted text is shorter than the minimum content threshold."""

    kind = "InsufficientContentError"
    default_stage = "extraction"


class UpstreamModelError(IngestionError):
    """The text-generation model failed. Absorbed internally, never surfaced."""

    kind = "UpstreamModelError"
    default_stage = "normalization"


class PersistenceError(IngestionError):
    """The metadata or record store could not be read or written."""

    kind = "PersistenceError"
    default_stage = "persistence"
