from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from .mime import get_mime_type


class UploadableFile(Protocol):
    """Anything with a name, a known byte length and readable bytes."""

    @property
    def name(self) -> str: ...

    @property
    def size(self) -> int: ...

    def read(self) -> bytes: ...


class BlobFile(BaseModel):
    """In-memory file handle."""

    model_config = ConfigDict(frozen=True)

    name: str
    data: bytes
    content_type: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)

    def read(self) -> bytes:
        return self.data

    @classmethod
    def from_path(cls, path: str | Path, name: str | None = None) -> BlobFile:
        p = Path(path)
        the_name = name or p.name
        return cls(name=the_name, data=p.read_bytes(), content_type=get_mime_type(the_name))
