# Standard library imports
import logging
import mimetypes
import re
from pathlib import PurePath
from typing import List

# Local application imports
from ....core.config import get_settings
from ....domain.models.known_face import KnownFace
from ....domain.repositories.face_repository import FaceRepository
from ....domain.constants import (
    ALLOWED_IMAGE_EXTENSIONS,
    ALLOWED_IMAGE_MIME,
    MAX_FACE_IMAGE_BYTES,
    REQUIRED_FACE_IMAGES,
)
from ....infrastructure.external.imagekit_client import ImageKitClient
from ...dto.face_dto import FaceImageUpload, FaceRegistrationRequest, FaceResponse

logger = logging.getLogger(__name__)

FACE_SAVE_FAILED = "Failed to save face data"


def face_file_name(name: str, index: int) -> str:
    """CDN file name for the index-th reference photo of a person."""
    slug = re.sub(r"\s+", "_", name).lower()
    return f"face_{slug}_{index}"


def _content_type(image: FaceImageUpload) -> str:
    if image.content_type:
        return image.content_type
    guessed, _ = mimetypes.guess_type(image.filename)
    return guessed or "application/octet-stream"


def validate_face_image(image: FaceImageUpload) -> None:
    """
    Raises:
        ValueError: If the upload is empty, too large or not a supported image type
    """
    extension = PurePath(image.filename or "").suffix.lower()
    content_type = (image.content_type or "").lower()
    if extension not in ALLOWED_IMAGE_EXTENSIONS and content_type not in ALLOWED_IMAGE_MIME:
        raise ValueError("Only JPG, PNG and WEBP images are allowed")
    if not image.content:
        raise ValueError(f"Image {image.filename} is empty")
    if len(image.content) > MAX_FACE_IMAGE_BYTES:
        raise ValueError(f"Image {image.filename} is too large")


class RegisterFaceUseCase:
    """Use case for training a face: upload three photos and store the person"""

    def __init__(self, face_repository: FaceRepository, imagekit_client: ImageKitClient) -> None:
        self.face_repository = face_repository
        self.imagekit_client = imagekit_client

    async def execute(self, request: FaceRegistrationRequest) -> FaceResponse:
        """
        Register a reference face

        Photos are uploaded one after another in the order given, then the
        person is saved with the resulting URLs.

        Raises:
            ValueError: Missing name, wrong number of photos or unsupported files
            RuntimeError: "Failed to save face data" if an upload or the save fails
        """
        name = (request.name or "").strip()
        if not name:
            raise ValueError("Please enter a name")
        if len(request.images) != REQUIRED_FACE_IMAGES:
            raise ValueError(f"Please upload {REQUIRED_FACE_IMAGES} images")
        for image in request.images:
            validate_face_image(image)

        folder = get_settings().imagekit_faces_folder
        image_urls: List[str] = []
        try:
            for index, image in enumerate(request.images):
                url = await self.imagekit_client.upload(
                    image.content,
                    face_file_name(name, index),
                    folder,
                    content_type=_content_type(image),
                )
                image_urls.append(url)

            face = await self.face_repository.create(KnownFace(id=None, name=name, image_urls=image_urls))
        except RuntimeError as e:
            logger.error("Error saving face data for %s: %s", name, e)
            raise RuntimeError(FACE_SAVE_FAILED)

        logger.info("Face %s registered with %d images", face.id, len(image_urls))
        return FaceResponse(id=face.id or "", name=face.name, image_urls=face.image_urls)
