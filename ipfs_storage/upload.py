from __future__ import annotations

from .config import get_access_token
from .errors import FileTooLargeError, UploadError
from .files import UploadableFile
from .storage.client import StorageBackend, make_storage_client
from .telemetry.logging import get_logger
from .telemetry.metrics import ipfs_upload_bytes_total, ipfs_uploads_total

MAX_UPLOAD_BYTES = 100 * 1024 * 1024  # 100MB
UPLOAD_MAX_RETRIES = 3


def upload_to_ipfs(
    file: UploadableFile,
    *,
    token: str | None = None,
    client: StorageBackend | None = None,
) -> str:
    """
    Upload one file to IPFS via web3.storage and return its CID.

    The token defaults to the one configured in the environment. Passing a
    ready ``client`` skips client construction entirely.

    Raises FileTooLargeError before touching the network when the file is over
    MAX_UPLOAD_BYTES, and UploadError for any failure reported by the backend.
    """
    size = file.size
    logger = get_logger(__name__).bind(name=file.name, size=size)
    if size > MAX_UPLOAD_BYTES:
        ipfs_uploads_total.labels(result="too_large").inc()
        raise FileTooLargeError(size, MAX_UPLOAD_BYTES)

    if client is None:
        client = make_storage_client(token if token is not None else get_access_token())

    try:
        cid = client.put([file], name=file.name, max_retries=UPLOAD_MAX_RETRIES)
    except Exception as e:
        ipfs_uploads_total.labels(result="error").inc()
        logger.exception("ipfs_upload_failed")
        raise UploadError() from e

    ipfs_uploads_total.labels(result="ok").inc()
    ipfs_upload_bytes_total.inc(size)
    logger.debug("ipfs_upload_ok", cid=cid)
    return cid
