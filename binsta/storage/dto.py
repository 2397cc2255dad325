# storage/dto.py
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

ROOT_FOLDER_ID = "root"


class FileNode(BaseModel):
    """Metadata of a single file record as returned by the API."""

    model_config = ConfigDict(extra="ignore")

    id: str
    type: Literal["file"] = "file"
    name: Optional[str] = None
    owner_id: str
    content_type: Optional[str] = None
    content_size: Optional[int] = None
    parent_id: Optional[str] = None
    upload_complete: bool = False
    created_at: str


class FolderSummary(BaseModel):
    """A folder as it appears among the children of another folder."""

    model_config = ConfigDict(extra="ignore")

    id: str
    type: Literal["folder"] = "folder"
    name: Optional[str] = None
    owner_id: str
    parent_id: Optional[str] = None
    created_at: str


FolderChild = Annotated[Union[FileNode, FolderSummary], Field(discriminator="type")]


class FolderNode(FolderSummary):
    """A folder together with its direct children."""

    children: List[FolderChild] = Field(default_factory=list)


class SignedUrl(BaseModel):
    """
    A one-time upload capability issued by the API. Only held transiently,
    between minting it and the upload that consumes it.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    path: str
    signed_url: str = Field(alias="signedUrl")
    token: str


class CreateFilePayload(BaseModel):
    name: Optional[str] = None
    folder_id: Optional[str] = None


class CreateFolderPayload(BaseModel):
    name: Optional[str] = None
    folder_id: Optional[str] = None


class ImageOutputFormat(str, Enum):
    JPG = "jpg"
    WEBP = "webp"


class ImageOutputSize(str, Enum):
    XXS = "2xs"
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XXL = "2xl"
    ORIGINAL = "original"


class ImageOutputQuality(str, Enum):
    LO = "lo"
    MD = "md"
    HI = "hi"
    BEST = "best"


class VideoOutputFormat(str, Enum):
    MP4 = "mp4"
    WEBM = "webm"


class VideoOutputSize(str, Enum):
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    ORIGINAL = "original"


class VideoOutputQuality(str, Enum):
    LO = "lo"
    MD = "md"
    HI = "hi"
    BEST = "best"


class ImageTransform(BaseModel):
    """Output options for an image variant. Unset options use the server default."""

    format: Optional[ImageOutputFormat] = None
    size: Optional[ImageOutputSize] = None
    quality: Optional[ImageOutputQuality] = None


class VideoTransform(BaseModel):
    """Output options for a video variant. Unset options use the server default."""

    format: Optional[VideoOutputFormat] = None
    size: Optional[VideoOutputSize] = None
    quality: Optional[VideoOutputQuality] = None
