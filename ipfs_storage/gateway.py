from __future__ import annotations

from urllib.parse import quote

import httpx
import requests

from .errors import RetrievalError
from .telemetry.logging import get_logger
from .telemetry.metrics import ipfs_gateway_fetch_total


IPFS_GATEWAY_URL = "https://ipfs.io"

# Same set of characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


def get_ipfs_gateway_url(cid: str) -> str:
    return f"{IPFS_GATEWAY_URL}/ipfs/{cid}"


def get_download_url(cid: str, filename: str) -> str:
    return f"{get_ipfs_gateway_url(cid)}?filename={quote(filename, safe=_URI_COMPONENT_SAFE)}"


def _check_status(cid: str, status_code: int, status_text: str) -> None:
    if 200 <= status_code <= 299:
        ipfs_gateway_fetch_total.labels(result="ok").inc()
        return
    ipfs_gateway_fetch_total.labels(result="error").inc()
    get_logger(__name__).info("ipfs_gateway_fetch_failed", cid=cid, status=status_code, reason=status_text)
    raise RetrievalError(status_code, status_text)


def get_from_ipfs(cid: str) -> requests.Response:
    """
    GET the content behind ``cid`` from the public gateway.

    The response is returned with its body unread (``stream=True``); the caller
    consumes and closes it. Non-2xx responses are closed here and raise
    RetrievalError, network errors from requests propagate as is.
    """
    r = requests.get(get_ipfs_gateway_url(cid), stream=True)
    try:
        _check_status(cid, r.status_code, r.reason or "")
    except RetrievalError:
        r.close()
        raise
    return r


async def aget_from_ipfs(cid: str, *, client: httpx.AsyncClient | None = None) -> httpx.Response:
    """Async variant of get_from_ipfs on top of httpx."""
    url = get_ipfs_gateway_url(cid)
    if client is not None:
        resp = await client.get(url)
    else:
        async with httpx.AsyncClient() as own:
            resp = await own.get(url)
    _check_status(cid, resp.status_code, resp.reason_phrase)
    return resp
