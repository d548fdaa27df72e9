from dataclasses import dataclass


@dataclass(frozen=True)
class RawDocument:
    """A stored upload as handed to the extractor. Never persisted."""

    data: bytes
    filename: str
    mime_type: str = "application/octet-stream"

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class ExtractedText:
    """Normalized plain text of a document plus its provenance."""

    text: str
    source_format: str  # "pdf", "docx", "doc" or "txt"
    source_bytes: int
