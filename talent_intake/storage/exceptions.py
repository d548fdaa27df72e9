class StorageError(Exception):
    """Raised when the storage backend cannot complete an operation."""


class StoredObjectNotFoundError(StorageError):
    """Raised when a bucket/path pair does not exist."""
