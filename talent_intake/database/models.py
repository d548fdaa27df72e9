from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UploadedFile:
    """Represents a row from the uploaded_files table."""

    id: str
    owner_id: str
    bucket: str
    path: str
    filename: str
    mime_type: str
    size_bytes: int
    created_at: datetime | None = None
