"""Shared fixtures for ipfs_storage tests."""

from unittest.mock import MagicMock

import pytest
from prometheus_client import REGISTRY

from ipfs_storage import BlobFile


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Tests never pick up a real token from the developer's shell or a .env in the checkout."""
    for var in ("WEB3_STORAGE_TOKEN", "NEXT_PUBLIC_WEB3_STORAGE_TOKEN", "WEB3_STORAGE_API_URL", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def blob():
    return BlobFile(name="report.pdf", data=b"%PDF-1.7 hello")


@pytest.fixture
def mock_backend():
    backend = MagicMock()
    backend.put.return_value = "bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi"
    return backend


def sample(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0
