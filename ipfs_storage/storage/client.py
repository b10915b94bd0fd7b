from __future__ import annotations

import io
from collections.abc import Sequence
from typing import Protocol
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import get_settings
from ..files import UploadableFile
from ..telemetry.logging import get_logger


RETRY_STATUSES = (429, 500, 502, 503, 504)


class StorageBackend(Protocol):
    def put(self, files: Sequence[UploadableFile], *, name: str, max_retries: int) -> str:
        """Store the files as one item and return its CID."""
        ...


class Web3StorageClient:
    """web3.storage HTTP API client. Retries live in urllib3, not here."""

    def __init__(self, token: str | None, api_url: str, backoff_factor: float = 0.5):
        self.token = token
        self.api = api_url.rstrip("/")
        self.backoff_factor = backoff_factor

    def _headers(self, name: str) -> dict[str, str]:
        headers = {"X-Name": quote(name, safe="")}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _retry(self, max_retries: int) -> Retry:
        return Retry(
            total=max_retries,
            backoff_factor=self.backoff_factor,
            status_forcelist=RETRY_STATUSES,
            allowed_methods=frozenset({"POST"}),
            raise_on_status=False,
        )

    def put(self, files: Sequence[UploadableFile], *, name: str, max_retries: int) -> str:
        form = [("file", (f.name, io.BytesIO(f.read()))) for f in files]
        with requests.Session() as session:
            session.mount("https://", HTTPAdapter(max_retries=self._retry(max_retries)))
            session.mount("http://", HTTPAdapter(max_retries=self._retry(max_retries)))
            r = session.post(f"{self.api}/upload", files=form, headers=self._headers(name))
        r.raise_for_status()
        cid = r.json()["cid"]
        get_logger(__name__).debug("web3_storage_put", name=name, files=len(form), cid=cid)
        return cid


def make_storage_client(token: str | None, *, api_url: str | None = None) -> Web3StorageClient:
    return Web3StorageClient(token=token, api_url=api_url or get_settings().web3_storage_api_url)
