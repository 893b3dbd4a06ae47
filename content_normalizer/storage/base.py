from abc import ABC, abstractmethod


class BaseStorage(ABC):
    """Contract for the sink that persists named blobs."""

    @abstractmethod
    def put(self, name: str, data: bytes) -> None:
        """Store ``data`` under ``name``, replacing any existing blob.

        Raises:
            StorageError: if the blob cannot be written.
        """

    @abstractmethod
    def get(self, name: str) -> bytes:
        """Return the blob stored under ``name``.

        Raises:
            StorageError: if the blob is missing or unreadable.
        """
