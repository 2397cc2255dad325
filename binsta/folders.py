# folders.py
import logging
from typing import Optional

from .storage.base import ResourceClient
from .storage.dto import ROOT_FOLDER_ID, CreateFolderPayload, FolderNode

logger = logging.getLogger(__name__)


class FoldersClient(ResourceClient):
    """Client for folder records."""

    def get(self, folder_id: str = ROOT_FOLDER_ID) -> FolderNode:
        """
        Fetches a folder with its direct children.
        The sentinel ID "root" addresses the caller's root folder.
        """
        return self._get_model(f"/meta/folders/{folder_id}", FolderNode)

    def create(
        self,
        payload: Optional[CreateFolderPayload] = None,
        *,
        name: Optional[str] = None,
        folder_id: Optional[str] = None,
    ) -> FolderNode:
        """Creates a folder, under the root folder unless folder_id is given."""
        if payload is None:
            payload = CreateFolderPayload(name=name, folder_id=folder_id)
        folder = self._post_model("/meta/folders", payload, FolderNode)
        logger.info(f"Created folder '{folder.id}' in folder '{folder.parent_id}'.")
        return folder
