from psycopg.rows import dict_row

from talent_intake.database.connection import get_connection
from talent_intake.database.models import UploadedFile


class UploadedFilesRepository:
    """Read access to the uploaded_files table."""

    def find_by_id(self, file_id: str) -> UploadedFile | None:
        """Find uploaded file metadata by ID. Returns None if it does not exist."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, owner_id, bucket, path, filename, mime_type,
                           size_bytes, created_at
                    FROM uploaded_files
                    WHERE id = %s
                    """,
                    (file_id,),
                )
                row = cur.fetchone()

        if row is None:
            return None

        return UploadedFile(
            id=str(row["id"]),
            owner_id=str(row["owner_id"]),
            bucket=row["bucket"],
            path=row["path"],
            filename=row["filename"],
            mime_type=row["mime_type"],
            size_bytes=row["size_bytes"],
            created_at=row["created_at"],
        )
