from __future__ import annotations


class IpfsStorageError(Exception):
    """Base class for errors raised by ipfs_storage."""


class FileTooLargeError(IpfsStorageError, ValueError):
    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"File size exceeds maximum limit of {limit // (1024 * 1024)}MB")


class UploadError(IpfsStorageError):
    """Upload failed on the backend side. The underlying error is only chained, never exposed in the message."""

    def __init__(self, message: str = "Failed to upload file to IPFS") -> None:
        super().__init__(message)


class RetrievalError(IpfsStorageError):
    def __init__(self, status_code: int, status_text: str) -> None:
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"Failed to fetch file from IPFS: {status_text}")
