import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


@contextmanager
def scoped_temp_file(
    data: bytes,
    *,
    suffix: str = "",
    directory: str | None = None,
) -> Iterator[Path]:
    """Write ``data`` to a uniquely-named temporary file and yield its path.

    The file is removed when the block exits, whether it returns, raises or
    is interrupted by task cancellation.
    """
    fd, name = tempfile.mkstemp(suffix=suffix, prefix="intake-", dir=directory)
    path = Path(name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        yield path
    finally:
        path.unlink(missing_ok=True)
