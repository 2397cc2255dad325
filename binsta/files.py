# files.py
import logging
from typing import Any, Mapping, Optional, Union

from .storage.base import ResourceClient
from .storage.dto import (
    CreateFilePayload,
    FileNode,
    ImageTransform,
    SignedUrl,
    VideoTransform,
)
from .uploads import UploadBody, encode_upload_body
from .variants import variant_url_for

logger = logging.getLogger(__name__)


class FilesClient(ResourceClient):
    """
    Client for file records: metadata, signed upload URLs, uploads and variant URLs.
    """

    def get(self, file_id: str) -> FileNode:
        """Fetches a file's metadata. Raises NotFoundError for unknown IDs."""
        return self._get_model(f"/meta/files/{file_id}", FileNode)

    def create(
        self,
        payload: Optional[CreateFilePayload] = None,
        *,
        name: Optional[str] = None,
        folder_id: Optional[str] = None,
    ) -> FileNode:
        """
        Creates an empty file record. Without a folder_id the file lands in the
        caller's root folder; without a name it stays unnamed.
        """
        if payload is None:
            payload = CreateFilePayload(name=name, folder_id=folder_id)
        file = self._post_model("/meta/files", payload, FileNode)
        logger.info(f"Created file '{file.id}' in folder '{file.parent_id}'.")
        return file

    def create_signed_upload_url(self, file_id: str) -> SignedUrl:
        """Mints the one-time capability for the next upload of a file."""
        return self._post_model(
            "/meta/signed-upload-urls", {"file_id": file_id}, SignedUrl
        )

    def upload(self, signed_url: Union[str, SignedUrl], body: UploadBody) -> Any:
        """
        Uploads file content to a signed URL.

        The request goes to the signed URL itself, authorized with the
        anonymous key rather than the caller's token.

        :param signed_url: The signed URL, or the SignedUrl it came from.
        :param body: A BlobBody, BufferBody or StreamBody.
        :return: The parsed response body of the storage service.
        """
        if isinstance(signed_url, SignedUrl):
            signed_url = signed_url.signed_url
        request = encode_upload_body(body)
        headers = {**self.transport.anon_headers, **request.pop("headers")}
        logger.info(f"Uploading {type(body).__name__} to signed URL...")
        return self.transport.put(signed_url, headers=headers, **request)

    def get_variant_url(
        self,
        file_id: str,
        transform: Union[ImageTransform, VideoTransform, Mapping[str, Any]],
    ) -> str:
        """Builds the URL of a transformed image or video. No request is made."""
        return variant_url_for(self.transport.config.api_url, file_id, transform)
