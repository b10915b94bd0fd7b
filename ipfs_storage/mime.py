from __future__ import annotations

from types import MappingProxyType

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = MappingProxyType(
    {
        # Images
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "png": "image/png",
        "gif": "image/gif",
        "webp": "image/webp",
        "svg": "image/svg+xml",
        # Documents
        "pdf": "application/pdf",
        "doc": "application/msword",
        "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "xls": "application/vnd.ms-excel",
        "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "ppt": "application/vnd.ms-powerpoint",
        "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        # Text
        "txt": "text/plain",
        "csv": "text/csv",
        "json": "application/json",
        # Archives
        "zip": "application/zip",
        "rar": "application/x-rar-compressed",
        "7z": "application/x-7z-compressed",
        "default": DEFAULT_MIME_TYPE,
    }
)


def get_mime_type(filename: str) -> str:
    """
    MIME type by filename extension, falling back to application/octet-stream.

    A name without a dot is looked up as a whole ("pdf" -> application/pdf).
    """
    extension = (filename or "").rsplit(".", 1)[-1].lower()
    if not extension:
        return DEFAULT_MIME_TYPE
    return MIME_TYPES.get(extension, DEFAULT_MIME_TYPE)
