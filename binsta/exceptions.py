# exceptions.py
import logging
from enum import Enum
from typing import Optional

import requests

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """The discriminator values the API puts in the ``type`` field of an error body."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    UNKNOWN = "UNKNOWN"


class ApiError(Exception):
    """
    Base class for every failed API call.

    :param message: The human-readable message supplied by the server, if any.
    :param status_code: The HTTP status of the failed response, if there was one.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: Optional[str] = None, *, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message or self.kind.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code!r})"


class UnauthenticatedError(ApiError):
    """The request carried no valid bearer token."""

    kind = ErrorKind.UNAUTHENTICATED


class ForbiddenError(ApiError):
    """The caller is authenticated but may not touch the resource."""

    kind = ErrorKind.FORBIDDEN


class NotFoundError(ApiError):
    """The addressed file or folder does not exist."""

    kind = ErrorKind.NOT_FOUND


class UnknownError(ApiError):
    """Any failure the server did not classify, including transport failures."""

    kind = ErrorKind.UNKNOWN


_ERRORS_BY_KIND = {
    cls.kind: cls
    for cls in (UnauthenticatedError, ForbiddenError, NotFoundError, UnknownError)
}


def _error_body(response: Optional[requests.Response]) -> dict:
    if response is None:
        return {}
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def classify(response: Optional[requests.Response]) -> ApiError:
    """
    Maps a failed response to exactly one typed error.

    The ``type`` field of the JSON error body selects the error class; a missing,
    unrecognized or unreadable discriminator always yields UnknownError.
    """
    body = _error_body(response)
    message = body.get("message")
    if not isinstance(message, str):
        message = None

    try:
        kind = ErrorKind(body.get("type"))
    except (ValueError, TypeError):
        kind = ErrorKind.UNKNOWN

    status_code = response.status_code if response is not None else None
    return _ERRORS_BY_KIND[kind](message, status_code=status_code)


def raise_for_response(response: requests.Response) -> None:
    """Raises the classified error for a non-2xx response, does nothing otherwise."""
    if 200 <= response.status_code < 300:
        return
    error = classify(response)
    logger.error(f"Request to {response.url} failed with status {response.status_code}: {error!r}")
    raise error
