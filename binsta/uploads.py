# uploads.py
"""
Upload bodies accepted by ``FilesClient.upload``.

A body is one of three variants. A blob is sent as a multipart form, the way
browser uploads reach the storage service; a buffer or a stream is sent as the
raw request body with explicit cache-control and content-type headers.
"""
from dataclasses import dataclass
from typing import Any, BinaryIO, Dict, Optional, Union

CACHE_MAX_AGE = 86400


@dataclass(frozen=True)
class BlobBody:
    """File content wrapped in a multipart form."""

    data: Union[bytes, BinaryIO]
    filename: Optional[str] = None
    content_type: Optional[str] = None


@dataclass(frozen=True)
class BufferBody:
    """In-memory file content."""

    buffer: bytes
    content_type: str


@dataclass(frozen=True)
class StreamBody:
    """A readable binary file-like object, streamed as the request body."""

    stream: BinaryIO
    content_type: str


UploadBody = Union[BlobBody, BufferBody, StreamBody]


def encode_upload_body(body: UploadBody) -> Dict[str, Any]:
    """
    Returns the request keyword arguments (``headers`` plus ``files``/``data``)
    for an upload body.

    The authorization header is not included.
    """
    if isinstance(body, BlobBody):
        blob = (body.filename or "blob", body.data)
        if body.content_type:
            blob += (body.content_type,)
        # requests sets the multipart/form-data content type with its boundary.
        return {
            "headers": {},
            "data": {"cacheControl": str(CACHE_MAX_AGE)},
            "files": {"": blob},
        }
    if isinstance(body, BufferBody):
        return {"headers": _raw_headers(body.content_type), "data": body.buffer}
    if isinstance(body, StreamBody):
        return {"headers": _raw_headers(body.content_type), "data": body.stream}
    raise TypeError(
        f"Unsupported upload body {type(body).__name__}; "
        "expected BlobBody, BufferBody or StreamBody."
    )


def _raw_headers(content_type: str) -> Dict[str, str]:
    return {
        "cache-control": f"max-age={CACHE_MAX_AGE}",
        "content-type": content_type,
    }
