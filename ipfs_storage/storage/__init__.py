from .client import StorageBackend, Web3StorageClient, make_storage_client

__all__ = ["StorageBackend", "Web3StorageClient", "make_storage_client"]
