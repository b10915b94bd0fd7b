from .config import Settings, get_access_token, get_settings
from .errors import FileTooLargeError, IpfsStorageError, RetrievalError, UploadError
from .files import BlobFile, UploadableFile
from .gateway import (
    IPFS_GATEWAY_URL,
    aget_from_ipfs,
    get_download_url,
    get_from_ipfs,
    get_ipfs_gateway_url,
)
from .mime import DEFAULT_MIME_TYPE, MIME_TYPES, get_mime_type
from .storage import StorageBackend, Web3StorageClient, make_storage_client
from .upload import MAX_UPLOAD_BYTES, UPLOAD_MAX_RETRIES, upload_to_ipfs

__all__ = [
    "DEFAULT_MIME_TYPE",
    "IPFS_GATEWAY_URL",
    "MAX_UPLOAD_BYTES",
    "MIME_TYPES",
    "UPLOAD_MAX_RETRIES",
    "BlobFile",
    "FileTooLargeError",
    "IpfsStorageError",
    "RetrievalError",
    "Settings",
    "StorageBackend",
    "UploadError",
    "UploadableFile",
    "Web3StorageClient",
    "aget_from_ipfs",
    "get_access_token",
    "get_download_url",
    "get_from_ipfs",
    "get_ipfs_gateway_url",
    "get_mime_type",
    "get_settings",
    "make_storage_client",
    "upload_to_ipfs",
]
