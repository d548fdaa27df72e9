from pathlib import Path

import pytest

from talent_intake.extraction.temp_files import scoped_temp_file


class TestScopedTempFile:
    def test_file_holds_data_inside_block(self, tmp_path: Path) -> None:
        with scoped_temp_file(b"payload", suffix=".pdf", directory=str(tmp_path)) as path:
            assert path.read_bytes() == b"payload"
            assert path.suffix == ".pdf"

    def test_file_removed_after_success(self, tmp_path: Path) -> None:
        with scoped_temp_file(b"payload", directory=str(tmp_path)) as path:
            pass
        assert not path.exists()
        assert list(tmp_path.iterdir()) == []

    def test_file_removed_after_error(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            with scoped_temp_file(b"payload", directory=str(tmp_path)) as path:
                raise RuntimeError("boom")
        assert not path.exists()

    def test_names_are_unique(self, tmp_path: Path) -> None:
        with scoped_temp_file(b"a", directory=str(tmp_path)) as first:
            with scoped_temp_file(b"b", directory=str(tmp_path)) as second:
                assert first != second
