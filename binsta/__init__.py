"""Python client for the Binsta file storage API."""

from .client import Client, create_client
from .config import ClientConfig, Settings, get_settings
from .exceptions import (
    ApiError,
    ErrorKind,
    ForbiddenError,
    NotFoundError,
    UnauthenticatedError,
    UnknownError,
)
from .storage.dto import (
    ROOT_FOLDER_ID,
    CreateFilePayload,
    CreateFolderPayload,
    FileNode,
    FolderNode,
    FolderSummary,
    ImageOutputFormat,
    ImageOutputQuality,
    ImageOutputSize,
    ImageTransform,
    SignedUrl,
    VideoOutputFormat,
    VideoOutputQuality,
    VideoOutputSize,
    VideoTransform,
)
from .uploads import BlobBody, BufferBody, StreamBody
from .variants import build_variant_url

__version__ = "0.1.0"

__all__ = [
    "Client",
    "create_client",
    "ClientConfig",
    "Settings",
    "get_settings",
    "ApiError",
    "ErrorKind",
    "UnauthenticatedError",
    "ForbiddenError",
    "NotFoundError",
    "UnknownError",
    "ROOT_FOLDER_ID",
    "FileNode",
    "FolderNode",
    "FolderSummary",
    "SignedUrl",
    "CreateFilePayload",
    "CreateFolderPayload",
    "ImageOutputFormat",
    "ImageOutputSize",
    "ImageOutputQuality",
    "VideoOutputFormat",
    "VideoOutputSize",
    "VideoOutputQuality",
    "ImageTransform",
    "VideoTransform",
    "BlobBody",
    "BufferBody",
    "StreamBody",
    "build_variant_url",
    "__version__",
]
