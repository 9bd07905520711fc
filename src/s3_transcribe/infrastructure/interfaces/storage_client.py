"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def get_object_size(self, bucket_name: str, object_key: str) -> int:
        """
        Looks up an object's size without downloading it.

        Args:
            bucket_name: The storage bucket name.
            object_key: The object key in storage.

        Returns:
            The object size in bytes.

        Raises:
            botocore.exceptions.ClientError: If the object is missing or
                access is denied. The error is not wrapped.
        """
