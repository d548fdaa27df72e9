from abc import ABC, abstractmethod


def storage_path(owner_id: str, category: str, file_id: str, original_name: str) -> str:
    """Build the conventional object path: {owner_id}/{category}/{file_id}_{original_name}"""
    return f"{owner_id}/{category}/{file_id}_{original_name}"


class BaseStorage(ABC):
    """Blob storage collaborator. Implementations must be safe for concurrent use."""

    @abstractmethod
    def put(self, bucket: str, path: str, data: bytes, content_type: str) -> str:
        """Store ``data`` and return its location."""

    @abstractmethod
    def get(self, bucket: str, path: str) -> bytes:
        """Return the stored bytes.

        Raises:
            StoredObjectNotFoundError: nothing is stored at bucket/path.
            StorageError: any other backend failure.
        """

    @abstractmethod
    def delete(self, bucket: str, path: str) -> bool:
        """Delete the object. Returns False when it did not exist."""
