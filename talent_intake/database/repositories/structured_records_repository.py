from psycopg.types.json import Jsonb

from talent_intake.database.connection import get_connection
from talent_intake.normalization.models import StructuredRecord


class StructuredRecordsRepository:
    """Persists normalizer output as a child of the owner and source file."""

    def save_structured_record(
        self,
        owner_id: str,
        source_ref: str,
        record: StructuredRecord,
    ) -> str:
        """Insert the record and return its generated ID.

        Args:
            owner_id: User that owns the source document.
            source_ref: ID of the uploaded file the record was produced from.
            record: Normalizer output, structured or degraded.
        """
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO structured_records
                        (owner_id, source_ref, schema_version, structured, payload, created_at)
                    VALUES (%s, %s, %s, %s, %s, NOW())
                    RETURNING id
                    """,
                    (
                        owner_id,
                        source_ref,
                        record.schema_version,
                        record.structured,
                        Jsonb(record.to_dict()),
                    ),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT INTO structured_records returned no id")
        return str(row[0])
