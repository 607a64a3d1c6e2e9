from __future__ import annotations

from io import BytesIO

from fastapi import UploadFile
from starlette.datastructures import Headers

from upload_matchers.config import settings


def synthetic_upload(content_type: str, *, size: int | None = None, filename: str | None = None) -> UploadFile:
    declared = settings.probe_size_bytes if size is None else size
    if declared < 0:
        raise ValueError("size must be >= 0")
    payload = b"\x00" * min(declared, settings.probe_payload_bytes)
    return UploadFile(
        file=BytesIO(payload),
        size=declared,
        filename=filename or settings.probe_filename,
        headers=Headers({"content-type": content_type}),
    )
