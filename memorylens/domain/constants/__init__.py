"""Constants for domain field names, database paths and media rules"""

from .account_fields import UserFields
from .memory_fields import MemoryFields, LocationFields, DetectedFaceFields
from .face_fields import FaceFields
from .database_paths import STATUS_PATH, IMAGES_PATH, FACES_PATH, USERS_PATH
from .media_constants import (
    ALLOWED_IMAGE_EXTENSIONS,
    ALLOWED_IMAGE_MIME,
    REQUIRED_FACE_IMAGES,
    MAX_FACE_IMAGE_BYTES,
    PLACEHOLDER_IMAGE_URL,
    UNKNOWN_LOCATION,
)

__all__ = [
    "UserFields",
    "MemoryFields",
    "LocationFields",
    "DetectedFaceFields",
    "FaceFields",
    "STATUS_PATH",
    "IMAGES_PATH",
    "FACES_PATH",
    "USERS_PATH",
    "ALLOWED_IMAGE_EXTENSIONS",
    "ALLOWED_IMAGE_MIME",
    "REQUIRED_FACE_IMAGES",
    "MAX_FACE_IMAGE_BYTES",
    "PLACEHOLDER_IMAGE_URL",
    "UNKNOWN_LOCATION",
]
