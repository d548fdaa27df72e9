from unittest.mock import MagicMock, patch

import pytest
from psycopg.types.json import Jsonb

from talent_intake.database.repositories.structured_records_repository import (
    StructuredRecordsRepository,
)
from talent_intake.normalization.models import StructuredRecord

_TARGET = "talent_intake.database.repositories.structured_records_repository.get_connection"


def _mock_connection(mock_get_conn: MagicMock) -> tuple[MagicMock, MagicMock]:
    mock_cursor = MagicMock()
    mock_conn = MagicMock()
    mock_conn.cursor.return_value.__enter__ = MagicMock(return_value=mock_cursor)
    mock_conn.cursor.return_value.__exit__ = MagicMock(return_value=False)
    mock_get_conn.return_value.__enter__ = MagicMock(return_value=mock_conn)
    mock_get_conn.return_value.__exit__ = MagicMock(return_value=False)
    return mock_conn, mock_cursor


class TestSaveStructuredRecord:
    @patch(_TARGET)
    def test_inserts_and_returns_id(self, mock_get_conn: MagicMock) -> None:
        mock_conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = (42,)
        record = StructuredRecord.degraded("raw text")

        record_id = StructuredRecordsRepository().save_structured_record("u1", "f9", record)

        assert record_id == "42"
        sql, params = mock_cursor.execute.call_args.args
        assert "INSERT INTO structured_records" in sql
        assert params[:4] == ("u1", "f9", "1", False)
        assert isinstance(params[4], Jsonb)
        mock_conn.commit.assert_called_once()

    @patch(_TARGET)
    def test_raises_when_no_id_returned(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = None

        with pytest.raises(RuntimeError, match="returned no id"):
            StructuredRecordsRepository().save_structured_record(
                "u1", "f9", StructuredRecord(extracted_text="text")
            )
