import os
import tempfile
from pathlib import Path

from talent_intake.storage.base import BaseStorage
from talent_intake.storage.exceptions import StorageError, StoredObjectNotFoundError


class LocalStorage(BaseStorage):
    """Stores objects on the local filesystem under ``{root}/{bucket}/{path}``.

    Writes go to a temporary sibling file first and are moved into place, so
    concurrent readers never observe a partial object.
    """

    DEFAULT_ROOT = Path("/app/files")

    def __init__(self, root: Path | None = None) -> None:
        self._root = (root if root is not None else self.DEFAULT_ROOT).resolve()

    def put(self, bucket: str, path: str, data: bytes, content_type: str) -> str:
        _ = content_type  # the filesystem keeps no metadata
        target = self._resolve(bucket, path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=".upload-")
            try:
                with os.fdopen(fd, "wb") as handle:
                    handle.write(data)
                os.replace(tmp_name, target)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Failed to store {bucket}/{path}: {exc}") from exc
        return f"{bucket}/{path}"

    def get(self, bucket: str, path: str) -> bytes:
        target = self._resolve(bucket, path)
        try:
            return target.read_bytes()
        except FileNotFoundError as exc:
            raise StoredObjectNotFoundError(f"Object not found: {bucket}/{path}") from exc
        except OSError as exc:
            raise StorageError(f"Failed to read {bucket}/{path}: {exc}") from exc

    def delete(self, bucket: str, path: str) -> bool:
        target = self._resolve(bucket, path)
        try:
            target.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError(f"Failed to delete {bucket}/{path}: {exc}") from exc
        return True

    def _resolve(self, bucket: str, path: str) -> Path:
        target = (self._root / bucket / path).resolve()
        if not target.is_relative_to(self._root / bucket):
            raise StorageError(f"Path escapes bucket: {bucket}/{path}")
        return target
