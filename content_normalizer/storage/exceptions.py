class StorageError(Exception):
    """Raised when a blob cannot be read from or written to storage."""
